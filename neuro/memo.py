class MemoizedValue(object):
    """
    A lazily computed value.

    read() calls the supplier on the first access and caches the result until
    invalidate() is called. set() installs a value directly, for values that
    are supplied from outside instead of being derived.
    """

    def __init__(self, supplier):
        self._supplier = supplier
        self._value = None
        self._has_value = False

    @property
    def has_value(self):
        return self._has_value

    def read(self):
        if not self._has_value:
            # if the supplier raises, the cell stays empty
            self._value = self._supplier()
            self._has_value = True
        return self._value

    def set(self, value):
        self._value = value
        self._has_value = True

    def invalidate(self):
        self._value = None
        self._has_value = False

    def __repr__(self):
        if self._has_value:
            return "MemoizedValue({0!r})".format(self._value)
        return "MemoizedValue(<unset>)"
