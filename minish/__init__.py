"""Building blocks of a small shell: environment, syntax checks, expansion, builtins and prompt."""

__version__ = "0.1.0"