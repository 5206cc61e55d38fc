# Client-side state that outlives a single request: the cookie jar, and the
# rule for combining per-call values with per-client defaults.
#
# The jar is deliberately dumb. There's no expiry and no domain or path
# matching: every cookie the server has ever set on this client goes out with
# every later request. Cookies only ever get added or overwritten, never
# removed.

__all__ = ["CookieJar", "merge_defaults"]


def merge_defaults(user, defaults):
    """Combine a per-call map with a per-client map of defaults.

    Keys the caller supplied always win; the defaults only fill in keys the
    caller left out. Neither argument is modified.

    """
    merged = dict(user)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
    return merged


class CookieJar:
    def __init__(self, cookies=None):
        self._cookies = {}
        if cookies is not None:
            self.update(cookies)

    def update(self, cookies):
        # Overwrite or insert; keys missing from *cookies* are left alone.
        for name, value in cookies.items():
            self._cookies[name] = value

    def merge(self, user_cookies):
        return merge_defaults(user_cookies, self._cookies)

    def get(self, name, default=None):
        return self._cookies.get(name, default)

    def as_dict(self):
        return dict(self._cookies)

    def __contains__(self, name):
        return name in self._cookies

    def __iter__(self):
        return iter(self._cookies)

    def __len__(self):
        return len(self._cookies)

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._cookies)

    # Useful for tests
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._cookies == other._cookies

    # This is an unhashable type.
    __hash__ = None
