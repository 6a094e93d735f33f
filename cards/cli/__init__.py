"""命令行界面模块."""

from .main import main

__all__ = ['main']
