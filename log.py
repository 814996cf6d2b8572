import sys

def _default_log_fn(data, *args, **kwargs):
    """Default sink: drop everything until main() installs one."""
    pass

# Stored on the module so every importer shares the same sink
_module = sys.modules[__name__]

_module._log_fn = _default_log_fn

def log(data, *args, **kwargs):
    """
    Send a message to the current sink.

    Supports:
    - log("message")
    - log("length {}", 5)           # str.format with positional args
    - log("[bold red]failed[/]")     # rich markup when the sink is console.print
    """
    if args and isinstance(data, str):
        try:
            data = data.format(*args)
        except (IndexError, KeyError, ValueError):
            pass  # keep the raw text if it doesn't format

    _module._log_fn(data, **kwargs)

def set_log_fn(fn):
    """
    Install the output function, e.g. console.print or print.
    """
    if not callable(fn):
        raise TypeError("log function must be callable")

    _module._log_fn = fn

def reset_log_fn():
    _module._log_fn = _default_log_fn
