"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from minilisp.config import get_prompt
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.printer import render

logger = logging.getLogger(__name__)

QUIT = "quit"


def repl(
    interp: Optional[Interpreter] = None,
    prompt: Optional[str] = None,
    input_fn: Callable[[str], str] = input,
    output: TextIO = sys.stdout,
) -> Interpreter:
    """Read a line, evaluate it, print the result; stop on `quit` or EOF.

    Errors abort only the current line: their message is printed and the
    session environment keeps every binding made before the failure.
    """
    interp = interp if interp is not None else Interpreter()
    prompt = prompt if prompt is not None else get_prompt()
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            break
        if line.strip() == QUIT:
            break
        if not line.strip():
            continue
        try:
            text = render(interp.eval(line))
        except LispError as e:
            logger.debug("%s while evaluating %r", e.kind, line)
            text = str(e)
        except RecursionError:
            logger.debug("recursion limit hit while evaluating %r", line)
            text = "Maximum recursion depth exceeded"
        print(text, file=output)
    return interp
