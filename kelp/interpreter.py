from __future__ import annotations

import logging
from typing import Literal

from kelp import LispValue
from kelp.builtin import create_root_scope
from kelp.config import PRELUDE_FILE, get_prelude_root
from kelp.evaluation.evaluator import eval_generic
from kelp.reader.parser import lex, TokenStream
from kelp.types.environment import Scope
from kelp.types.values import Error, NIL

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Kelp code.
    Maintains one session Scope across calls; definitions persist between
    `eval` calls and shadow the native registry without modifying it.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.scope: Scope = create_root_scope()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        path = get_prelude_root() / PRELUDE_FILE
        if not path.is_file():
            logger.debug("no prelude at %s", path)
            return
        logger.debug("loading prelude from %s", path)
        self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> None:
        for result in self.eval_all(code):
            if isinstance(result, Error):
                logger.warning("prelude form failed: %s", result)

    def eval_all(self, code: str) -> list[LispValue]:
        """Read and evaluate every form in `code`, returning each result."""
        stream = TokenStream(lex(code))
        return [eval_generic(expr, self.scope) for expr in stream.parse_all()]

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last result (nil if none)."""
        results = self.eval_all(code)
        if not results:
            return NIL
        return results[-1]

    def rep(self, code: str) -> str:
        """Read, evaluate, print."""
        return str(self.eval(code))
