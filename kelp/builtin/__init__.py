"""The native registry: one scope holding every builtin, built once per process.

Sessions evaluate in a child of this scope, so user definitions shadow
natives without ever writing to the registry itself.
"""

import logging
from functools import cache

from kelp.types.environment import Scope
from kelp.evaluation.special_forms import SPECIAL_FORMS
from kelp.builtin.env_builtin import register as register_functions
from kelp.builtin.macro_builtin import register as register_macros

logger = logging.getLogger(__name__)


@cache
def native_scope() -> Scope:
    scope = Scope()
    for name, form in SPECIAL_FORMS.items():
        scope.set(name, form)
    register_functions(scope)
    register_macros(scope)
    logger.debug("native registry built with %d bindings", len(scope.bindings))
    return scope


def create_root_scope() -> Scope:
    """A fresh top-level session scope over the native registry."""
    return native_scope().child()
