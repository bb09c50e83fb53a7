"""imeitype.infra — configuration and logging setup."""

from imeitype.infra.config import DEFAULT_CONFIG as DEFAULT_CONFIG
from imeitype.infra.config import ImeiConfig as ImeiConfig
from imeitype.infra.log import setup_logging as setup_logging
