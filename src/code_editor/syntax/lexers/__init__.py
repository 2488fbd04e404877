"""Built-in single-line lexers."""

from .python import PythonLexer
from .script import ScriptLexer
from .shell import ShellLexer
from .typescript import TypeScriptLexer

__all__ = ["PythonLexer", "ScriptLexer", "ShellLexer", "TypeScriptLexer"]
