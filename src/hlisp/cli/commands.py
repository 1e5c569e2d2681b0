"""
CLI Command Handlers Facade.

Re-exports handlers from `hlisp.cli.handlers` so the dispatcher has a single
import site.
"""

from hlisp.cli.handlers.compile import handle_compile
from hlisp.cli.handlers.forms import handle_forms

__all__ = ["handle_compile", "handle_forms"]
