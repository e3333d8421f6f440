class InvalidArgument(ValueError):  # noqa: N818
    """Raised when an operation receives an argument outside of its domain.

    This is a programming error: validate the argument before calling rather than recovering from it.

    Example:
    ```python
    >>> import pyotoolkit as pt
    >>> pt.chunk([1, 2, 3], 0)
    Traceback (most recent call last):
    ...
    pyotoolkit._errors.InvalidArgument: size must be greater than 0, got 0

    ```
    """
