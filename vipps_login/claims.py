"""Claim names and the read-only claim collection handed to the extractor."""

from collections.abc import Iterable, Iterator, Mapping, Sequence

# OpenID Connect claim names
ISSUER = "iss"
SUBJECT = "sub"
BIRTH_DATE = "birthdate"
EMAIL = "email"
EMAIL_VERIFIED = "email_verified"
FAMILY_NAME = "family_name"
GIVEN_NAME = "given_name"
NAME = "name"
PHONE_NUMBER = "phone_number"
ADDRESS = "address"

# Vipps specific claim names
NNIN = "nnin"
OTHER_ADDRESSES = "other_addresses"

# Legacy WS-Federation claim types, still emitted by some identity middleware
_WS_CLAIMS = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/"

LEGACY_NAME_IDENTIFIER = _WS_CLAIMS + "nameidentifier"
LEGACY_DATE_OF_BIRTH = _WS_CLAIMS + "dateofbirth"
LEGACY_EMAIL = _WS_CLAIMS + "emailaddress"
LEGACY_SURNAME = _WS_CLAIMS + "surname"
LEGACY_GIVEN_NAME = _WS_CLAIMS + "givenname"
LEGACY_NAME = _WS_CLAIMS + "name"
LEGACY_HOME_PHONE = _WS_CLAIMS + "homephone"
LEGACY_MOBILE_PHONE = _WS_CLAIMS + "mobilephone"
LEGACY_OTHER_PHONE = _WS_CLAIMS + "otherphone"


class ClaimSet:
    """An immutable multi-map of claim names to string values.

    A claim name may occur more than once (e.g. several `other_addresses`
    claims). Insertion order is kept per name and across names.
    """

    __slots__ = ("_claims",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        claims: dict[str, list[str]] = {}
        for name, value in pairs:
            claims.setdefault(name, []).append(value)
        self._claims = {name: tuple(values) for name, values in claims.items()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | Sequence[str]]) -> "ClaimSet":
        """Build a claim set from a mapping of names to one or many values."""
        pairs = []
        for name, value in data.items():
            if isinstance(value, str):
                pairs.append((name, value))
            else:
                pairs.extend((name, item) for item in value)
        return cls(pairs)

    def first(self, name: str) -> str | None:
        """Return the first value of `name`, or None if the claim is absent."""
        values = self._claims.get(name)
        return values[0] if values else None

    def find_first(self, *names: str) -> str | None:
        """Return the first value of the first claim present among `names`."""
        for name in names:
            if name in self._claims:
                return self._claims[name][0]
        return None

    def find_all(self, name: str) -> list[str]:
        """Return every value of `name` in insertion order."""
        return list(self._claims.get(name, ()))

    def merge(self, other: "ClaimSet") -> "ClaimSet":
        """Return a new claim set with the claims of `other` appended."""
        return ClaimSet([*self, *other])

    def __contains__(self, name: object) -> bool:
        return name in self._claims

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for name, values in self._claims.items():
            for value in values:
                yield name, value

    def __len__(self) -> int:
        return sum(len(values) for values in self._claims.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClaimSet):
            return NotImplemented
        return self._claims == other._claims

    def __repr__(self) -> str:
        return f"ClaimSet({list(self)!r})"
