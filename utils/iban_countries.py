"""Per-country IBAN layouts (ISO 13616 registry lengths and BBAN field positions)."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

BANK_MARKER = "b"
BRANCH_MARKER = "s"
ACCOUNT_MARKER = "c"

Span = Optional[Tuple[int, int]]


def _span(template: str, marker: str) -> Span:
    first = template.find(marker)
    last = template.rfind(marker)
    if first < 0 or last < 0:
        return None
    return first, last + 1


@dataclass(frozen=True)
class CountryLayout:
    """
    IBAN layout of one country.

    ``fields`` is written like a formatted IBAN (blocks of 4), one marker per
    position: b = bank code, s = branch / sort code, c = account number.
    Any other character is not extracted. The spans are half-open and index
    the canonical (space-free) IBAN.
    """

    code: str
    name: str
    length: int
    fields: str
    bank_span: Span = field(init=False, repr=False)
    branch_span: Span = field(init=False, repr=False)
    account_span: Span = field(init=False, repr=False)

    def __post_init__(self) -> None:
        compact = self.fields.replace(" ", "")
        object.__setattr__(self, "bank_span", _span(compact, BANK_MARKER))
        object.__setattr__(self, "branch_span", _span(compact, BRANCH_MARKER))
        object.__setattr__(self, "account_span", _span(compact, ACCOUNT_MARKER))


# code, country, total length, field layout
# ES: branch digits use "g" so no sort code is extracted (legacy behaviour).
_ROWS = (
    ("AD", "Andorra", 24, "ADkk bbbb ssss cccc cccc cccc"),
    ("AE", "United Arab Emirates", 23, "AEkk bbbc cccc cccc cccc ccc"),
    ("AL", "Albania", 28, "ALkk bbbs sssx cccc cccc cccc cccc"),
    ("AT", "Austria", 20, "ATkk bbbb bccc cccc cccc"),
    ("AZ", "Azerbaijan", 28, "AZkk bbbb cccc cccc cccc cccc cccc"),
    ("BA", "Bosnia and Herzegovina", 20, "BAkk bbbs sscc cccc ccxx"),
    ("BE", "Belgium", 16, "BEkk bbbc cccc ccxx"),
    ("BG", "Bulgaria", 22, "BGkk bbbb ssss ttcc cccc cc"),
    ("BH", "Bahrain", 22, "BHkk bbbb cccc cccc cccc cc"),
    ("BI", "Burundi", 27, "BIkk bbbb bsss sscc cccc cccc cxx"),
    ("BR", "Brazil", 29, "BRkk bbbb bbbb ssss sccc cccc ccct n"),
    ("BY", "Belarus", 28, "BYkk bbbb tttt cccc cccc cccc cccc"),
    ("CH", "Switzerland", 21, "CHkk bbbb bccc cccc cccc c"),
    ("CR", "Costa Rica", 22, "CRkk rbbb cccc cccc cccc cc"),
    ("CY", "Cyprus", 28, "CYkk bbbs ssss cccc cccc cccc cccc"),
    ("CZ", "Czech Republic", 24, "CZkk bbbb cccc cccc cccc cccc"),
    ("DE", "Germany", 22, "DEkk bbbb bbbb cccc cccc cc"),
    ("DJ", "Djibouti", 27, "DJkk bbbb bsss sscc cccc cccc cxx"),
    ("DK", "Denmark", 18, "DKkk bbbb cccc cccc cc"),
    ("DO", "Dominican Republic", 28, "DOkk bbbb cccc cccc cccc cccc cccc"),
    ("EE", "Estonia", 20, "EEkk bbcc cccc cccc cccc"),
    ("EG", "Egypt", 29, "EGkk bbbb ssss cccc cccc cccc cccc c"),
    ("ES", "Spain", 24, "ESkk bbbb gggg xxcc cccc cccc"),
    ("FI", "Finland", 18, "FIkk bbbc cccc cccc cc"),
    ("FK", "Falkland Islands", 18, "FKkk bbcc cccc cccc cc"),
    ("FO", "Faroe Islands", 18, "FOkk bbbb cccc cccc cx"),
    ("FR", "France", 27, "FRkk bbbb bsss sscc cccc cccc cxx"),
    ("GB", "United Kingdom", 22, "GBkk bbbb ssss sscc cccc cc"),
    ("GE", "Georgia", 22, "GEkk bbcc cccc cccc cccc cc"),
    ("GI", "Gibraltar", 23, "GIkk bbbb cccc cccc cccc ccc"),
    ("GL", "Greenland", 18, "GLkk bbbb cccc cccc cc"),
    ("GR", "Greece", 27, "GRkk bbbs sssc cccc cccc cccc ccc"),
    ("GT", "Guatemala", 28, "GTkk bbbb cccc cccc cccc cccc cccc"),
    ("HR", "Croatia", 21, "HRkk bbbb bbbc cccc cccc c"),
    ("HU", "Hungary", 28, "HUkk bbbs sssx cccc cccc cccc cccx"),
    ("IE", "Ireland", 22, "IEkk bbbb ssss sscc cccc cc"),
    ("IL", "Israel", 23, "ILkk bbbs sscc cccc cccc ccc"),
    ("IQ", "Iraq", 23, "IQkk bbbb sssc cccc cccc ccc"),
    ("IS", "Iceland", 26, "ISkk bbss ttcc cccc iiii iiii ii"),
    ("IT", "Italy", 27, "ITkk xbbb bbss sssc cccc cccc ccc"),
    ("JO", "Jordan", 30, "JOkk bbbb ssss cccc cccc cccc cccc cc"),
    ("KW", "Kuwait", 30, "KWkk bbbb cccc cccc cccc cccc cccc cc"),
    ("KZ", "Kazakhstan", 20, "KZkk bbbc cccc cccc cccc"),
    ("LB", "Lebanon", 28, "LBkk bbbb cccc cccc cccc cccc cccc"),
    ("LC", "Saint Lucia", 32, "LCkk bbbb cccc cccc cccc cccc cccc cccc"),
    ("LI", "Liechtenstein", 21, "LIkk bbbb bccc cccc cccc c"),
    ("LT", "Lithuania", 20, "LTkk bbbb bccc cccc cccc"),
    ("LU", "Luxembourg", 20, "LUkk bbbc cccc cccc cccc"),
    ("LV", "Latvia", 21, "LVkk bbbb cccc cccc cccc c"),
    ("LY", "Libya", 25, "LYkk bbbs sscc cccc cccc cccc c"),
    ("MC", "Monaco", 27, "MCkk bbbb bsss sscc cccc cccc cxx"),
    ("MD", "Moldova", 24, "MDkk bbcc cccc cccc cccc cccc"),
    ("ME", "Montenegro", 22, "MEkk bbbc cccc cccc cccc xx"),
    ("MK", "North Macedonia", 19, "MKkk bbbc cccc cccc cxx"),
    ("MN", "Mongolia", 20, "MNkk bbbb cccc cccc cccc"),
    ("MR", "Mauritania", 27, "MRkk bbbb bsss sscc cccc cccc cxx"),
    ("MT", "Malta", 31, "MTkk bbbb ssss sccc cccc cccc cccc ccc"),
    ("MU", "Mauritius", 30, "MUkk bbbb bbss cccc cccc cccc rrru uu"),
    ("NI", "Nicaragua", 28, "NIkk bbbb cccc cccc cccc cccc cccc"),
    ("NL", "Netherlands", 18, "NLkk bbbb cccc cccc cc"),
    ("NO", "Norway", 15, "NOkk bbbb cccc ccx"),
    ("OM", "Oman", 23, "OMkk bbbc cccc cccc cccc ccc"),
    ("PK", "Pakistan", 24, "PKkk bbbb cccc cccc cccc cccc"),
    ("PL", "Poland", 28, "PLkk bbbs sssx cccc cccc cccc cccc"),
    ("PS", "Palestine", 29, "PSkk bbbb cccc cccc cccc cccc cccc c"),
    ("PT", "Portugal", 25, "PTkk bbbb ssss cccc cccc cccx x"),
    ("QA", "Qatar", 29, "QAkk bbbb cccc cccc cccc cccc cccc c"),
    ("RO", "Romania", 24, "ROkk bbbb cccc cccc cccc cccc"),
    ("RS", "Serbia", 22, "RSkk bbbc cccc cccc cccc xx"),
    ("RU", "Russia", 33, "RUkk bbbb bbbb bsss sscc cccc cccc cccc c"),
    ("SA", "Saudi Arabia", 24, "SAkk bbcc cccc cccc cccc cccc"),
    ("SC", "Seychelles", 31, "SCkk bbbb bbss cccc cccc cccc cccc uuu"),
    ("SD", "Sudan", 18, "SDkk bbcc cccc cccc cc"),
    ("SE", "Sweden", 24, "SEkk bbbc cccc cccc cccc cccc"),
    ("SI", "Slovenia", 19, "SIkk bbss sccc cccc cxx"),
    ("SK", "Slovakia", 24, "SKkk bbbb cccc cccc cccc cccc"),
    ("SM", "San Marino", 27, "SMkk xbbb bbss sssc cccc cccc ccc"),
    ("SO", "Somalia", 23, "SOkk bbbb sssc cccc cccc ccc"),
    ("ST", "Sao Tome and Principe", 25, "STkk bbbb ssss cccc cccc cccx x"),
    ("SV", "El Salvador", 28, "SVkk bbbb cccc cccc cccc cccc cccc"),
    ("TL", "Timor-Leste", 23, "TLkk bbbc cccc cccc cccc cxx"),
    ("TN", "Tunisia", 24, "TNkk bbss sccc cccc cccc ccxx"),
    ("TR", "Turkey", 26, "TRkk bbbb brcc cccc cccc cccc cc"),
    ("UA", "Ukraine", 29, "UAkk bbbb bbcc cccc cccc cccc cccc c"),
    ("VA", "Vatican City State", 22, "VAkk bbbc cccc cccc cccc cc"),
    ("VG", "Virgin Islands, British", 24, "VGkk bbbb cccc cccc cccc cccc"),
    ("XK", "Kosovo", 20, "XKkk bbss cccc cccc ccxx"),
    ("YE", "Yemen", 30, "YEkk bbbb ssss cccc cccc cccc cccc cc"),
)

COUNTRIES: Mapping[str, CountryLayout] = MappingProxyType(
    {code: CountryLayout(code, name, length, fields) for code, name, length, fields in _ROWS}
)


def lookup(country_code: str) -> Optional[CountryLayout]:
    """Return the layout for a two-letter country code, or None if unsupported."""
    return COUNTRIES.get(country_code)
