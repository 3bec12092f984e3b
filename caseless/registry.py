from . import logging
from .exception import UnsupportedKeyKind


logger = logging.getLogger(__name__)


class NameRegistry:
    """Maps the canonical (lower-cased string) form of a key to the first spelling seen for it.

    Once a form is tracked with spelling ``X``, any other casing resolves to ``X``
    until the form is untracked again. Re-tracking never replaces the stored spelling.
    """

    def __init__(self, keys=()):
        self._names = {}
        for key in keys:
            self.track(key)

    @staticmethod
    def canonical(key):
        # bool is an int subclass but not a number kind we accept
        if isinstance(key, bool) or not isinstance(key, (str, int, float)):
            logger.warning("Rejected key %r", key, tag_key_kind=type(key).__name__)
            raise UnsupportedKeyKind(key)
        return str(key).lower()

    def track(self, key):
        form = self.canonical(key)
        if form not in self._names:
            self._names[form] = key
            logger.debug("Tracking %r as spelling of %r", key, form)

    def untrack(self, key):
        form = self.canonical(key)
        if self._names.pop(form, None) is not None:
            logger.debug("Released spelling of %r", form)

    def resolve(self, key):
        return self._names.get(self.canonical(key), key)

    def __contains__(self, form):
        return form in self._names

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._names!r})"
