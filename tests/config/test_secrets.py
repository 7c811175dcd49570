"""Secret masking applied to every log event."""
import pytest

from idp_service.config.secrets import mask_secret, mask_secrets_in_dict, mask_secrets_processor


pytestmark = pytest.mark.unit


def test_mask_secret():
    assert mask_secret("sk-live-123") == "****"
    assert mask_secret("") == ""


@pytest.mark.parametrize("key", ["secret_key", "LLM_API_KEY", "Authorization", "refresh_token", "db_password"])
def test_sensitive_keys_are_masked(key):
    assert mask_secrets_in_dict({key: "value"})[key] == "****"


def test_other_keys_pass_through():
    event = {"slug": "payment-api", "user_id": "user-1", "duration_ms": 12.5}

    assert mask_secrets_in_dict(event) == event


def test_nested_dicts_and_lists():
    event = {
        "llm": {"model": "gpt-4o-mini", "api_key": "sk-abc"},
        "headers": [{"authorization": "Bearer abc"}, "plain"],
    }

    masked = mask_secrets_in_dict(event)

    assert masked["llm"] == {"model": "gpt-4o-mini", "api_key": "****"}
    assert masked["headers"] == [{"authorization": "****"}, "plain"]


def test_extra_keys():
    masked = mask_secrets_in_dict({"webhook_signature": "abc", "slug": "x"}, keys=["webhook_signature"])

    assert masked == {"webhook_signature": "****", "slug": "x"}


def test_non_string_values_are_left_alone():
    assert mask_secrets_in_dict({"token_expiry_minutes": 60})["token_expiry_minutes"] == 60


def test_processor_masks_event_dict():
    masked = mask_secrets_processor(None, "info", {"event": "Token issued", "token": "eyJhbGci"})

    assert masked == {"event": "Token issued", "token": "****"}
