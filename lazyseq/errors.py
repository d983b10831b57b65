class LazySequenceError(Exception):
    """base class for errors raised by lazyseq itself"""
    pass


class InvalidSourceError(LazySequenceError, TypeError):
    """the construction argument is none, or neither iterable nor callable"""

    def __init__(self, source):
        self.source = source
        if source is None:
            message = "source is None"
        else:
            message = f"source of type {type(source).__name__} is not iterable or a production function"
        super().__init__(message)


class EmptySequenceError(LazySequenceError, ValueError):
    """a fold ran over an empty sequence without an initial value"""

    def __init__(self, operation: str = "reduce"):
        self.operation = operation
        super().__init__(f"{operation} of empty sequence with no initial value")
