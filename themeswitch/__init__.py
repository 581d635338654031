"""ThemeSwitch: theme catalog, selection and persistence for Qt apps."""

__version__ = "0.3.0"
