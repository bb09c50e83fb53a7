"""imeitype.core — public API for the IMEI value type."""

from imeitype.core.checksum import (
    check_digit as check_digit,
)
from imeitype.core.checksum import (
    checksum_is_valid as checksum_is_valid,
)
from imeitype.core.checksum import (
    luhn_is_valid as luhn_is_valid,
)
from imeitype.core.errors import (
    ImeiError as ImeiError,
)
from imeitype.core.errors import (
    ImeiFormatError as ImeiFormatError,
)
from imeitype.core.errors import (
    InvalidFormat as InvalidFormat,
)
from imeitype.core.errors import (
    JsonImeiError as JsonImeiError,
)
from imeitype.core.generators import (
    REPORTING_BODY_IDS as REPORTING_BODY_IDS,
)
from imeitype.core.generators import (
    new_random as new_random,
)
from imeitype.core.generators import (
    new_random_secure as new_random_secure,
)
from imeitype.core.generators import (
    new_random_seeded as new_random_seeded,
)
from imeitype.core.generators import (
    random_imeis as random_imeis,
)
from imeitype.core.imei import (
    INVALID_IMEI as INVALID_IMEI,
)
from imeitype.core.imei import (
    Imei as Imei,
)
from imeitype.core.imei import (
    explain_invalid as explain_invalid,
)
from imeitype.core.imei import (
    is_valid as is_valid,
)
from imeitype.core.imei import (
    parse_int as parse_int,
)
from imeitype.core.imei import (
    parse_text as parse_text,
)
from imeitype.core.imei import (
    parse_utf8 as parse_utf8,
)
from imeitype.core.imei import (
    try_parse as try_parse,
)
from imeitype.core.imei import (
    try_parse_or_invalid as try_parse_or_invalid,
)
from imeitype.core.layout import (
    INVALID_VALUE as INVALID_VALUE,
)
from imeitype.core.layout import (
    LENGTH as LENGTH,
)
from imeitype.core.layout import (
    MAX_VALUE as MAX_VALUE,
)
from imeitype.core.layout import (
    MIN_VALUE as MIN_VALUE,
)
from imeitype.core.parsers import (
    ValidationMode as ValidationMode,
)
from imeitype.core.result import (
    Err as Err,
)
from imeitype.core.result import (
    Ok as Ok,
)
from imeitype.core.result import (
    Result as Result,
)
from imeitype.core.result import (
    unwrap as unwrap,
)
from imeitype.core.serialization import (
    ImeiJSONEncoder as ImeiJSONEncoder,
)
from imeitype.core.serialization import (
    JsonImeiWriteOptions as JsonImeiWriteOptions,
)
from imeitype.core.serialization import (
    decode_imei as decode_imei,
)
from imeitype.core.serialization import (
    decode_imei_keys as decode_imei_keys,
)
from imeitype.core.serialization import (
    dumps_imei as dumps_imei,
)
from imeitype.core.serialization import (
    json_key as json_key,
)
from imeitype.core.serialization import (
    loads_imei as loads_imei,
)
from imeitype.core.validators import (
    is_valid_int as is_valid_int,
)
from imeitype.core.validators import (
    is_valid_text as is_valid_text,
)
from imeitype.core.validators import (
    is_valid_utf8 as is_valid_utf8,
)
