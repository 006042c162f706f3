import base64
from dataclasses import dataclass, field

BASIC_SCHEME = "Basic"


def basic_auth_base64(api_key: str) -> str:
    # Snipcart takes the secret key as the username with an empty password
    raw = (api_key + ":").encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class Credential:
    key: str = field(repr=False)
    auth_base64: str = field(repr=False)

    @classmethod
    def from_key(cls, api_key: str) -> "Credential":
        return cls(key=api_key, auth_base64=basic_auth_base64(api_key))

    @property
    def scheme(self) -> str:
        return BASIC_SCHEME

    @property
    def header_value(self) -> str:
        return f"{BASIC_SCHEME} {self.auth_base64}"
