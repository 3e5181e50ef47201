"""Capture hook modules.

One short-lived process per hook event:

* ``dispatcher``: entrypoint; gates, captures, always acknowledges.
* ``gate``: home resolution and the ``.enabled`` marker check.
* ``sources``: stdin and environment-variable event sources.
* ``decoder``: tolerant JSON decoding.
* ``records``: tool-use and prompt record builders.
* ``append_log``: append-only JSONL writer.
* ``pipeline``: orchestration with injected dependencies.
"""
