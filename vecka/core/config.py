# vecka/core/config.py

import os
from typing import Final


# ==========================
# Miljö
# ==========================

#: Sätts via PRODUCTION=true. Styr loggformat och CORS.
IS_PRODUCTION: Final[bool] = os.getenv("PRODUCTION", "false").lower() == "true"

#: Katalog för loggfiler. Skapas vid setup_logging().
LOG_DIR_NAME: Final[str] = os.getenv("VECKA_LOG_DIR", "logs")

#: Versionssträng som visas i /health och i FastAPI-metadata.
APP_VERSION: Final[str] = "0.3.1"


# ==========================
# Årsintervall för API:t
# ==========================

#: Första helt gregorianska året. Tidigare år räknas också av kärnan
#: men saknar historisk mening, så API:t avvisar dem som standard.
FIRST_GREGORIAN_YEAR: Final[int] = 1583

#: Lägsta år som API:t accepterar.
MIN_SUPPORTED_YEAR: Final[int] = int(os.getenv("VECKA_MIN_YEAR", str(FIRST_GREGORIAN_YEAR)))

#: Högsta år som API:t accepterar.
MAX_SUPPORTED_YEAR: Final[int] = int(os.getenv("VECKA_MAX_YEAR", "4099"))

#: Maximalt antal år i en iCal-export.
MAX_EXPORT_YEARS: Final[int] = 50


# ==========================
# Veckodagsfönster
# ==========================

#: Midsommardagen: lördagen 20-26 juni, (månad, dag) för start och slut.
MIDSUMMER_WINDOW: Final[tuple[tuple[int, int], tuple[int, int]]] = ((6, 20), (6, 26))

#: Alla helgons dag: lördagen 31 oktober - 6 november.
#: Fönstret korsar en månadsgräns.
ALL_SAINTS_WINDOW: Final[tuple[tuple[int, int], tuple[int, int]]] = ((10, 31), (11, 6))
