import pytest

from issuer_override.core.models import MapperResult, ProtocolMapperModel, ProviderConfigProperty, TokenKind


KEYCLOAK_REPRESENTATION = {
    "id": "5f1c",
    "name": "realm-issuer-override",
    "protocol": "openid-connect",
    "protocolMapper": "realm-issuer-override-protocol-mapper",
    "consentRequired": False,
    "config": {
        "realmIssuerUrl": "https://auth.acme.example",
        "access.token.claim": "true",
        "id.token.claim": "false",
    },
}


def test_from_representation():
    model = ProtocolMapperModel.from_representation(KEYCLOAK_REPRESENTATION)
    assert model.id == "5f1c"
    assert model.protocol_mapper == "realm-issuer-override-protocol-mapper"
    assert model.config["realmIssuerUrl"] == "https://auth.acme.example"


def test_to_representation_omits_missing_id():
    rep = ProtocolMapperModel(name="m", protocol_mapper="p", config={"a": "b"}).to_representation()
    assert rep == {"name": "m", "protocol": "openid-connect", "protocolMapper": "p", "config": {"a": "b"}}


@pytest.mark.parametrize(
    "kind, expected",
    [(TokenKind.ACCESS, True), (TokenKind.ID, False), (TokenKind.USERINFO, True)],
)
def test_includes_reads_keycloak_flags(kind, expected):
    model = ProtocolMapperModel.from_representation(KEYCLOAK_REPRESENTATION)
    assert model.includes(kind) is expected


def test_config_property_representation_includes_default_only_when_set():
    prop = ProviderConfigProperty(name="n", label="L", help_text="h", default_value="d")
    assert prop.to_representation()["defaultValue"] == "d"
    assert "defaultValue" not in ProviderConfigProperty(name="n", label="L", help_text="h").to_representation()


def test_mapper_result_ok():
    token = {"iss": "x"}
    assert MapperResult(token=token).unwrap() is token


def test_from_representation_drops_null_config_values():
    model = ProtocolMapperModel.from_representation(
        {"name": "m", "protocolMapper": "p", "config": {"realmIssuerUrl": None, "id.token.claim": False}}
    )
    assert model.config == {"id.token.claim": "False"}
    assert "realmIssuerUrl" not in model.config
