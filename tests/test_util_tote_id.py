import pytest

from app.utils.util_error_handle import ValidationError
from app.utils.util_tote_id import TOTE_ID_PATTERN, check_tote_id, generate_tote_id, is_valid_tote_id


def test_generated_ids_match_pattern():
    for _ in range(200):
        tote_id = generate_tote_id()
        assert len(tote_id) == 6
        assert TOTE_ID_PATTERN.match(tote_id)


@pytest.mark.parametrize("tote_id", ["abc123", "ABCDEF", "000000", "aZ9bY8"])
def test_valid_tote_ids(tote_id):
    assert is_valid_tote_id(tote_id)
    check_tote_id(tote_id)


@pytest.mark.parametrize("tote_id", ["", "abc12", "abc1234", "abc-12", "abc 12", "ábc123", None, 123456])
def test_invalid_tote_ids(tote_id):
    assert not is_valid_tote_id(tote_id)


def test_check_tote_id_raises_bad_request():
    with pytest.raises(ValidationError) as exc_info:
        check_tote_id("bad!")
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid tote ID format"
