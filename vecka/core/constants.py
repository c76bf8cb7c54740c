# vecka/core/constants.py
from typing import Final

# ==========================
# Helgdagsnamn
# ==========================

#: Fasta datum.
NYARSDAGEN: Final[str] = "Nyårsdagen"
TRETTONDEDAG_JUL: Final[str] = "Trettondedag jul"
FORSTA_MAJ: Final[str] = "Första maj"
NATIONALDAGEN: Final[str] = "Sveriges nationaldag"
JULDAGEN: Final[str] = "Juldagen"
ANNANDAG_JUL: Final[str] = "Annandag jul"

#: Rörliga, räknade från påskdagen.
LANGFREDAGEN: Final[str] = "Långfredagen"
PASKDAGEN: Final[str] = "Påskdagen"
ANNANDAG_PASK: Final[str] = "Annandag påsk"
KRISTI_HIMMELSFARDSDAG: Final[str] = "Kristi himmelsfärdsdag"
PINGSTDAGEN: Final[str] = "Pingstdagen"

#: Lördag i ett datumfönster.
MIDSOMMARDAGEN: Final[str] = "Midsommardagen"
ALLA_HELGONS_DAG: Final[str] = "Alla helgons dag"

#: Alla 13 namn som holiday_name() kan returnera.
HOLIDAY_NAMES: Final[tuple[str, ...]] = (
    NYARSDAGEN,
    TRETTONDEDAG_JUL,
    FORSTA_MAJ,
    NATIONALDAGEN,
    JULDAGEN,
    ANNANDAG_JUL,
    LANGFREDAGEN,
    PASKDAGEN,
    ANNANDAG_PASK,
    KRISTI_HIMMELSFARDSDAG,
    PINGSTDAGEN,
    MIDSOMMARDAGEN,
    ALLA_HELGONS_DAG,
)


# ==========================
# Veckostruktur
# ==========================

#: Antal dagar per vecka. Används i loopar i stället för "7".
DAYS_PER_WEEK: Final[int] = 7

#: ISO-veckodag för torsdag (1 = måndag). Torsdagen avgör vilket år en ISO-vecka tillhör.
ISO_THURSDAY: Final[int] = 4

#: ISO-veckodag för måndag, veckans första dag.
ISO_MONDAY: Final[int] = 1

#: Högsta veckonummer ett ISO-år kan ha.
MAX_ISO_WEEK: Final[int] = 53


# ==========================
# Veckodagsnamn (presentation)
# ==========================

#: Svenska namn på veckodagar, indexerade som datetime.weekday() (0=måndag, 6=söndag).
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Måndag",
    "Tisdag",
    "Onsdag",
    "Torsdag",
    "Fredag",
    "Lördag",
    "Söndag",
)

#: Engelska månadsförkortningar för veckans datumintervall ("Jan 6 – Jan 12, 2025").
#: Explicit lista i stället för strftime("%b") så att resultatet inte beror på locale.
MONTH_ABBREVIATIONS: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
