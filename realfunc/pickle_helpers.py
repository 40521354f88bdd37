r"""@package realfunc.pickle_helpers

Helper functions to (un)pickle expression trees containing singletons.

Some expression objects, like the constant zero `basics.ZERO`, exist exactly
once per process and other parts of the expression system test for them by
identity (e.g. a product with the `ZERO` singleton as factor knows it is zero).
A plain pickle round trip would create copies of these objects and silently
lose this information.

Running all your values to pickle through prepare_value() replaces the
registered singletons with named placeholders. To restore the values to their
original form, run them through restore_value(), which puts the live
singletons of the current process back in place.

For convenience, prepare_dict() and restore_dict() do this on the values of
dictionaries, which is suitable for use in a `__getstate__()` and
`__setstate__()` implementation, respectively.

Example implementations might look like:

\code
def __getstate__(self):
    return prepare_dict(self.__dict__)

def __setstate__(self, state):
    self.__dict__.update(restore_dict(state))
\endcode
"""


__all__ = [
    "register_singleton",
    "singleton_key",
    "prepare_value",
    "prepare_dict",
    "restore_value",
    "restore_dict",
]


## Registered singletons by key.
_SINGLETONS = dict()

## Keys of the registered singletons by object id.
_KEYS = dict()


class _SingletonRef(object):
    r"""Picklable placeholder for a registered singleton."""
    # pylint: disable=too-few-public-methods
    def __init__(self, key):
        r"""Init function.

        @param key
            Key under which the singleton was registered using
            register_singleton().
        """
        self._key = key

    @property
    def value(self):
        r"""The actual singleton object of the current process."""
        return _SINGLETONS[self._key]


def register_singleton(key, obj):
    r"""Register an object to be pickled by reference and return it."""
    _SINGLETONS[key] = obj
    _KEYS[id(obj)] = key
    return obj


def singleton_key(obj):
    r"""Return the key of a registered singleton or `None` for other objects."""
    key = _KEYS.get(id(obj))
    if key is not None and _SINGLETONS[key] is obj:
        return key
    return None


def prepare_value(value):
    r"""Prepare a value for being pickled.

    Most values are left untouched, only registered singletons are replaced by
    placeholders that restore_value() turns back into the very same objects.
    Tuples, lists and dicts are prepared recursively.
    """
    if type(value) is tuple:
        return tuple(prepare_value(v) for v in value)
    if type(value) is list:
        return [prepare_value(v) for v in value]
    if type(value) is dict:
        return prepare_dict(value)
    key = singleton_key(value)
    if key is not None:
        return _SingletonRef(key)
    return value


def restore_value(value):
    r"""Restore an unpickled value to its original form."""
    if type(value) is tuple:
        return tuple(restore_value(v) for v in value)
    if type(value) is list:
        return [restore_value(v) for v in value]
    if type(value) is dict:
        return restore_dict(value)
    if isinstance(value, _SingletonRef):
        return value.value
    return value


def prepare_dict(data):
    r"""Convenience method to run prepare_value() on a dict."""
    return dict((k, prepare_value(v)) for k, v in data.items())


def restore_dict(data):
    r"""Convenience method to run restore_value() on a dict."""
    return dict((k, restore_value(v)) for k, v in data.items())
