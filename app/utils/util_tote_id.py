import random
import re
import string
from app.core.core_config import settings
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError

TOTE_ID_ALPHABET = string.ascii_letters + string.digits
TOTE_ID_PATTERN = re.compile(r"^[A-Za-z0-9]{6}$")


def generate_tote_id() -> str:
    return "".join(random.choices(TOTE_ID_ALPHABET, k=settings.TABLE_MAX_LENGTH_TOTE_ID))


def is_valid_tote_id(tote_id: object) -> bool:
    return isinstance(tote_id, str) and TOTE_ID_PATTERN.fullmatch(tote_id) is not None


# 路徑參數中的 tote id 必須是 6 碼英數字
def check_tote_id(tote_id: str) -> None:
    if not is_valid_tote_id(tote_id):
        raise ValidationError(ServerErrorMessage.TOTE_ID_INVALID)
