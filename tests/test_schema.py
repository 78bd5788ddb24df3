from __future__ import annotations

import pytest
import guildpeek


def test_validate_full(full_payload: dict):
    validated = guildpeek.validate_invite(full_payload)
    assert validated.version is guildpeek.ProtocolVersion.v9
    assert validated.payload['code'] == 'abc123'

    # Unknown keys are stripped
    assert 'flags' not in validated.payload


def test_validate_vanity(vanity_payload: dict):
    validated = guildpeek.validate_invite(vanity_payload, version=guildpeek.ProtocolVersion.v9)
    assert 'inviter' not in validated.payload
    assert validated.payload['expires_at'] is None


def test_validate_accepts_unknown_fields(full_payload: dict):
    full_payload['guild']['brand_new_field'] = {'x': 1}
    full_payload['inviter']['another_one'] = [1, 2, 3]
    guildpeek.validate_invite(full_payload)


def test_validate_accepts_opaque_fields(full_payload: dict):
    full_payload['inviter']['collectibles'] = 'anything'
    full_payload['inviter']['display_name_styles'] = {'font_id': 11, 'effect_id': 2, 'colors': [1, 2]}
    full_payload['profile']['game_activity'] = [{'whatever': True}]
    full_payload['profile']['traits'] = ['a', 1, None]
    guildpeek.validate_invite(full_payload)


def test_validate_reports_paths(full_payload: dict):
    del full_payload['guild']['name']
    full_payload['channel']['type'] = '0'

    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)

    paths = [path for path, _ in exc_info.value.errors]
    assert 'guild.name' in paths
    assert 'channel.type' in paths
    assert 'guild.name' in str(exc_info.value)


def test_validate_rejects_null_required(full_payload: dict):
    full_payload['guild']['features'] = None

    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)

    assert exc_info.value.errors[0][0] == 'guild.features'


def test_validate_rejects_wrong_item_type(full_payload: dict):
    full_payload['guild']['features'].append(42)

    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)

    assert exc_info.value.errors[0][0] == 'guild.features.4'


def test_validate_is_strict(full_payload: dict):
    full_payload['guild']['nsfw'] = 0

    with pytest.raises(guildpeek.ValidationError):
        guildpeek.validate_invite(full_payload)


@pytest.mark.parametrize('data', [None, [], 'invite', 42])
def test_validate_rejects_non_objects(data):
    with pytest.raises(guildpeek.ValidationError):
        guildpeek.validate_invite(data)


def test_validate_rejects_bad_timestamp(full_payload: dict):
    full_payload['expires_at'] = 'tomorrow'

    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)

    assert exc_info.value.errors == [
        ('expires_at', "Input should be a valid ISO 8601 timestamp, got 'tomorrow'"),
    ]


def test_validate_rejects_inconsistent_counts(full_payload: dict):
    full_payload['profile']['member_count'] = 10
    full_payload['profile']['online_count'] = 11

    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)
    assert [path for path, _ in exc_info.value.errors] == ['profile.member_count']

    full_payload['profile']['online_count'] = -1
    with pytest.raises(guildpeek.ValidationError) as exc_info:
        guildpeek.validate_invite(full_payload)
    assert [path for path, _ in exc_info.value.errors] == ['profile.online_count']


def test_validated_invite_cannot_be_created_directly(full_payload: dict):
    with pytest.raises(TypeError):
        guildpeek.ValidatedInvite(guildpeek.ProtocolVersion.v9, full_payload)


def test_parser_accepts_only_validated(state: guildpeek.State, full_payload: dict):
    with pytest.raises(TypeError):
        state.parser.parse_invite(full_payload)  # type: ignore
