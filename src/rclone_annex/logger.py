#!/usr/bin/env python
# -*- coding: utf-8 -*-

from contextlib import contextmanager
import functools
import inspect
import sys

from typing_extensions import Callable

def format_args(func, message, *args, **kwargs):
    signature = inspect.signature(func)
    bound_args = signature.bind(*args, **kwargs)
    bound_args.apply_defaults()
    return message.format(*bound_args.args, **bound_args.arguments)

ERROR = 0
WARNING = 1
INFO = 2
VERBOSE = 3
DEBUG = 4

LEVELS = {
    "error": ERROR,
    "warning": WARNING,
    "info": INFO,
    "verbose": VERBOSE,
    "debug": DEBUG,
}

class Logger:
    """A simple configurable logger"""
    def __init__(self, log_func: Callable, log_level=INFO):
        self.log_func = log_func
        self.log_level = log_level

    @contextmanager
    def section(self, name):
        """A context manager for logging the beginning and end of a code block"""
        self.debug(f"Starting {name}...")
        yield
        self.debug(f"Finished {name}")

    def method(self, name=None):
        """A decorator for logging when a method begins and ends"""
        if callable(name):
            return self.method()(name)
        def decorator(method):
            @functools.wraps(method)
            def wrapper(*args, **kwargs):
                if name is None:
                    arg_strings = [str(arg) for arg in args] + [f'{k}={v}' for k, v in kwargs.items()]
                    inner_name = f"{method.__name__}({', '.join(arg_strings)})"
                else:
                    inner_name = format_args(method, name, *args, **kwargs)
                with self.section(inner_name):
                    return method(*args, **kwargs)
            return wrapper
        return decorator

    def set_level(self, level_name: str):
        self.log_level = LEVELS[level_name.lower()]

    def log(self, log_level, *message):
        """Conditionally log a message based on the configured log level"""
        if self.log_level >= log_level:
            self.log_func(*message)

    def debug(self, *message):
        """Log a message with DEBUG severity"""
        self.log(DEBUG, *message)

    def verbose(self, *message):
        """Log a message with VERBOSE severity"""
        self.log(VERBOSE, *message)

    def info(self, *message):
        """Log a message with INFO severity"""
        self.log(INFO, *message)

    def warning(self, *message):
        """Log a message with WARNING severity"""
        self.log(WARNING, *message)

    def error(self, *message):
        """Log a message with ERROR severity"""
        self.log(ERROR, *message)

def print_to_stderr(*message):
    # stdout belongs to git-annex; everything we say goes to stderr.
    print(*message, file=sys.stderr, flush=True)

null_logger = Logger(lambda *args, **kwargs: None)
"""null_logger is a logger that swallows all messages"""

logger = Logger(print_to_stderr, INFO)
"""logger is the process logger. It never writes to stdout, which carries the annex protocol."""
