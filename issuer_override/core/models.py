"""Value types shared by the mapper, the registry and the Keycloak helper."""
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, MutableMapping, Optional

from .exceptions import MapperError

STRING_TYPE = "String"
OIDC_PROTOCOL = "openid-connect"

# Claim holding the token issuer
ISSUER_CLAIM = "iss"

# Token representations are claim mappings mutated in place
TokenRepresentation = MutableMapping[str, Any]


class TokenKind(str, enum.Enum):
    """Token types a protocol mapper can be applied to."""

    ACCESS = "access"
    ID = "id"
    USERINFO = "userinfo"

    @property
    def include_flag(self) -> str:
        """Keycloak config key that toggles the mapper for this token type."""
        return _INCLUDE_FLAGS[self]


_INCLUDE_FLAGS = {
    TokenKind.ACCESS: "access.token.claim",
    TokenKind.ID: "id.token.claim",
    TokenKind.USERINFO: "userinfo.token.claim",
}


@dataclass(frozen=True)
class ProviderConfigProperty:
    """Declaration of one mapper configuration field, rendered by the host admin UI."""
    name: str
    label: str
    help_text: str
    type: str = STRING_TYPE
    required: bool = False
    default_value: Optional[str] = None

    def to_representation(self) -> Dict[str, Any]:
        rep: Dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "helpText": self.help_text,
            "type": self.type,
            "required": self.required,
        }
        if self.default_value is not None:
            rep["defaultValue"] = self.default_value
        return rep


@dataclass
class ProtocolMapperModel:
    """A configured mapper instance as the host stores it.

    Mirrors the Keycloak ``ProtocolMapperRepresentation``:
        {"id": ..., "name": ..., "protocol": "openid-connect",
         "protocolMapper": "<provider id>", "config": {...}}
    """
    name: str
    protocol_mapper: str
    config: Dict[str, str] = field(default_factory=dict)
    protocol: str = OIDC_PROTOCOL
    id: Optional[str] = None

    def includes(self, kind: TokenKind) -> bool:
        """Return whether the mapper is enabled for the given token type.

        Absent flags count as enabled.
        """
        value = self.config.get(kind.include_flag)
        if value is None:
            return True
        return str(value).strip().lower() == "true"

    @classmethod
    def from_representation(cls, rep: Mapping[str, Any]) -> "ProtocolMapperModel":
        return cls(
            id=rep.get("id"),
            name=rep.get("name", ""),
            protocol=rep.get("protocol", OIDC_PROTOCOL),
            protocol_mapper=rep.get("protocolMapper", ""),
            config={k: str(v) for k, v in (rep.get("config") or {}).items() if v is not None},
        )

    def to_representation(self) -> Dict[str, Any]:
        rep: Dict[str, Any] = {
            "name": self.name,
            "protocol": self.protocol,
            "protocolMapper": self.protocol_mapper,
            "config": dict(self.config),
        }
        if self.id:
            rep["id"] = self.id
        return rep


@dataclass(frozen=True)
class MapperResult:
    """Outcome of a transform attempt: the token, or the error that stopped it."""
    token: Optional[TokenRepresentation] = None
    error: Optional[MapperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> TokenRepresentation:
        """Return the token or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.token
