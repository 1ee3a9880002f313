"""create-mutorr-stack: scaffold a Vite + React + MUI + Redux Toolkit app."""

__version__ = "1.0.0"
