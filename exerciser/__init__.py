"""Worked solutions to a course of small Rust exercises, with status-line and rust-analyzer helpers."""

__version__ = "5.4.1"