"""Cloudinary request signing.

The signature is the SHA-256 hex digest of every signable parameter, sorted by
name and joined as ``name=value`` pairs with ``&``, with the API secret
appended directly after the last value. The file, cloud name, resource type
and API key are never part of the signed string.
"""

import hashlib
from collections.abc import Mapping

EXCLUDED_PARAMS = frozenset({"file", "cloud_name", "resource_type", "api_key"})


def canonical_string(params: Mapping[str, object], api_secret: str) -> str:
    pairs = [f"{name}={params[name]}" for name in sorted(params) if name not in EXCLUDED_PARAMS]
    return "&".join(pairs) + api_secret


class RequestSigner:
    def __init__(self, api_secret: str):
        self._api_secret = api_secret

    def sign_params(self, params: Mapping[str, object]) -> str:
        payload = canonical_string(params, self._api_secret)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def sign(self, timestamp: int) -> str:
        return self.sign_params({"timestamp": timestamp})
