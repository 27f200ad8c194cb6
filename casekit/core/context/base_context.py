class BaseContext(dict):
    """Dict whose keys double as attributes; survives pickling."""

    __setattr__ = dict.__setitem__

    def __getattr__(self, name):
        if name in self:
            return self[name]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __delattr__(self, name):
        if name not in self:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        del self[name]

    def __setstate__(self, state):
        self.update(state)

    def __reduce__(self):
        return self.__class__, (), dict(self)
