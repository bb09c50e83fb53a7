"""imeitype.workflow -- Temporal payload conversion for Imei values."""

from imeitype.workflow.converter import (
    IMEI_DATA_CONVERTER as IMEI_DATA_CONVERTER,
)
from imeitype.workflow.converter import (
    ImeiPayloadConverter as ImeiPayloadConverter,
)
