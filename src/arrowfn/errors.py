"""Exceptions raised by arrowfn itself (never by user functions)."""

ARITY_HELP = (
    'Cannot determine function arity automatically. This may occur when:\n'
    '  1. The function is a builtin (implemented in C, no signature)\n'
    '  2. The function is compiled without introspection data '
    '(extension module, some callables)\n'
    '  3. The function uses only variadic parameters (*args)\n'
    "Please pass the 'arity' argument explicitly, "
    'or use the fixed arity curry2 ... curry8 instead.'
)


class ArrowfnError(Exception):
    pass


class ArityError(ArrowfnError, TypeError):
    def __init__(self, func: object, reason: str = ARITY_HELP) -> None:
        self.func = func
        super().__init__(f'partial: {reason} (got {func!r})')


class EmptyListError(ArrowfnError, ValueError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f'{operation}: empty list')
