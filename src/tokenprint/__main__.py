from tokenprint.cli import _run

_run()
