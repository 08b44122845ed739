"""User-defined callables and parameter-list binding for Kelp."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from kelp.evaluation.evaluator import eval_args, eval_sequence
from kelp.types.environment import Scope
from kelp.types.token import TokenType
from kelp.types.values import Atom, Error, List, Value

logger = logging.getLogger(__name__)

REST_MARKER = "&"


def parse_params(params: Value) -> tuple[list[str], Optional[str]] | Error:
    """Split a parameter list into positional names and an optional rest name.

    (a b & more) -> (["a", "b"], "more")
    """
    if not isinstance(params, List):
        return Error(f"parameter list must be a list, got {params}")

    names: list[str] = []
    rest: Optional[str] = None
    items = params.items
    i = 0
    while i < len(items):
        p = items[i]
        if not isinstance(p, Atom) or p.kind is not TokenType.SYMBOL:
            return Error(f"parameter must be a symbol, got {p}")
        if p.text == REST_MARKER:
            if i != len(items) - 2 or not isinstance(items[i + 1], Atom):
                return Error(f"{REST_MARKER} must be followed by exactly one name")
            rest = items[i + 1].text
            break
        names.append(p.text)
        i += 1
    return names, rest


class Lambda:
    """A closure: parameters, body forms and the scope it was defined in.

    Calling a Lambda evaluates the arguments in the caller's scope, binds them
    in a fresh child of the *definition* scope and evaluates the body there.
    """

    __slots__ = ("params", "rest", "body", "scope", "name")

    def __init__(
        self,
        params: list[str],
        body: Sequence[Value],
        scope: Scope,
        rest: Optional[str] = None,
        name: str = "anonymous",
    ):
        self.params: list[str] = params
        self.rest: Optional[str] = rest
        self.body: tuple[Value, ...] = tuple(body)
        self.scope: Scope = scope
        self.name = name

    def bind(self, args: Sequence[Value]) -> Scope | Error:
        """Bind argument values to the parameters in a new invocation frame."""
        arity = len(self.params)
        if len(args) < arity or (self.rest is None and len(args) > arity):
            expected = f"at least {arity}" if self.rest is not None else str(arity)
            return Error(f"{self.name} takes {expected} args, got {len(args)}")

        frame = self.scope.child()
        for name, value in zip(self.params, args):
            frame.set(name, value)
        if self.rest is not None:
            frame.set(self.rest, List(tuple(args[arity:])))
        return frame

    def renamed(self, name: str) -> Lambda:
        """A copy sharing params, body and scope under a new name."""
        return type(self)(self.params, self.body, self.scope, self.rest, name)

    def invoke(self, args: Sequence[Value]) -> Value:
        frame = self.bind(args)
        if isinstance(frame, Error):
            return frame
        return eval_sequence(self.body, frame)

    def __call__(self, lst: List, scope: Scope) -> Value:
        args = eval_args(lst, scope)
        if isinstance(args, Error):
            return args
        logger.debug("calling %s with %d args", self.name, len(args))
        return self.invoke(args)


class MacroLambda(Lambda):
    """A macro transformer: parameters are bound to the unevaluated arguments
    and the body's result is the expansion."""

    __slots__ = ()

    def __call__(self, lst: List, scope: Scope) -> Value:
        return self.invoke(lst.rest())