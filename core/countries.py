# =============================================================================
# core/countries.py  —  Country Directory
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps country display names to ISO 3166-1 alpha-2 codes (the set of
#   countries Calendarific supports) and back, with exact, case-insensitive
#   and substring lookups.  No network access; every lookup is a table scan
#   over a few hundred rows.
#
# LOOKUP RULES:
#   - code_for_name: exact key first, then case-insensitive, first match wins
#   - name_for_code: input upper-cased, exact match on stored codes
#   - search:        case-insensitive substring of name OR code, unranked
#   Lookups never raise; "not found" is None or an empty list.
#
# PRIORITY LISTS:
#   Multi-country queries do not fan out over every supported country.  Each
#   one walks a fixed, hand-picked list of large countries instead, which
#   bounds the number of provider calls per question.
# =============================================================================

from typing import Iterable, Optional

from core.models import CountryEntry

COUNTRY_CODES: dict[str, str] = {
    "Afghanistan": "AF",
    "Albania": "AL",
    "Algeria": "DZ",
    "American Samoa": "AS",
    "Andorra": "AD",
    "Angola": "AO",
    "Anguilla": "AI",
    "Antigua and Barbuda": "AG",
    "Argentina": "AR",
    "Armenia": "AM",
    "Aruba": "AW",
    "Australia": "AU",
    "Austria": "AT",
    "Azerbaijan": "AZ",
    "Bahamas": "BS",
    "Bahrain": "BH",
    "Bangladesh": "BD",
    "Barbados": "BB",
    "Belarus": "BY",
    "Belgium": "BE",
    "Belize": "BZ",
    "Benin": "BJ",
    "Bermuda": "BM",
    "Bhutan": "BT",
    "Bolivia": "BO",
    "Bosnia and Herzegovina": "BA",
    "Botswana": "BW",
    "Brazil": "BR",
    "British Virgin Islands": "VG",
    "Brunei": "BN",
    "Bulgaria": "BG",
    "Burkina Faso": "BF",
    "Burundi": "BI",
    "Cabo Verde": "CV",
    "Cambodia": "KH",
    "Cameroon": "CM",
    "Canada": "CA",
    "Cayman Islands": "KY",
    "Central African Republic": "CF",
    "Chad": "TD",
    "Chile": "CL",
    "China": "CN",
    "Colombia": "CO",
    "Comoros": "KM",
    "Congo": "CG",
    "Congo Democratic Republic": "CD",
    "Cook Islands": "CK",
    "Costa Rica": "CR",
    "Cote d'Ivoire": "CI",
    "Croatia": "HR",
    "Cuba": "CU",
    "Curaçao": "CW",
    "Cyprus": "CY",
    "Czechia": "CZ",
    "Denmark": "DK",
    "Djibouti": "DJ",
    "Dominica": "DM",
    "Dominican Republic": "DO",
    "East Timor": "TL",
    "Ecuador": "EC",
    "Egypt": "EG",
    "El Salvador": "SV",
    "Equatorial Guinea": "GQ",
    "Eritrea": "ER",
    "Estonia": "EE",
    "Eswatini": "SZ",
    "Ethiopia": "ET",
    "Falkland Islands": "FK",
    "Faroe Islands": "FO",
    "Fiji": "FJ",
    "Finland": "FI",
    "France": "FR",
    "French Polynesia": "PF",
    "Gabon": "GA",
    "Gambia": "GM",
    "Georgia": "GE",
    "Germany": "DE",
    "Ghana": "GH",
    "Gibraltar": "GI",
    "Greece": "GR",
    "Greenland": "GL",
    "Grenada": "GD",
    "Guam": "GU",
    "Guatemala": "GT",
    "Guernsey": "GG",
    "Guinea": "GN",
    "Guinea-Bissau": "GW",
    "Guyana": "GY",
    "Haiti": "HT",
    "Holy See (Vatican City)": "VA",
    "Honduras": "HN",
    "Hong Kong": "HK",
    "Hungary": "HU",
    "Iceland": "IS",
    "India": "IN",
    "Indonesia": "ID",
    "Iran": "IR",
    "Iraq": "IQ",
    "Ireland": "IE",
    "Isle of Man": "IM",
    "Israel": "IL",
    "Italy": "IT",
    "Jamaica": "JM",
    "Japan": "JP",
    "Jersey": "JE",
    "Jordan": "JO",
    "Kazakhstan": "KZ",
    "Kenya": "KE",
    "Kiribati": "KI",
    "Kosovo": "XK",
    "Kuwait": "KW",
    "Kyrgyzstan": "KG",
    "Laos": "LA",
    "Latvia": "LV",
    "Lebanon": "LB",
    "Lesotho": "LS",
    "Liberia": "LR",
    "Libya": "LY",
    "Liechtenstein": "LI",
    "Lithuania": "LT",
    "Luxembourg": "LU",
    "Macau": "MO",
    "Madagascar": "MG",
    "Malawi": "MW",
    "Malaysia": "MY",
    "Maldives": "MV",
    "Mali": "ML",
    "Malta": "MT",
    "Marshall Islands": "MH",
    "Martinique": "MQ",
    "Mauritania": "MR",
    "Mauritius": "MU",
    "Mayotte": "YT",
    "Mexico": "MX",
    "Micronesia": "FM",
    "Moldova": "MD",
    "Monaco": "MC",
    "Mongolia": "MN",
    "Montenegro": "ME",
    "Montserrat": "MS",
    "Morocco": "MA",
    "Mozambique": "MZ",
    "Myanmar": "MM",
    "Namibia": "NA",
    "Nauru": "NR",
    "Nepal": "NP",
    "Netherlands": "NL",
    "New Caledonia": "NC",
    "New Zealand": "NZ",
    "Nicaragua": "NI",
    "Niger": "NE",
    "Nigeria": "NG",
    "North Korea": "KP",
    "North Macedonia": "MK",
    "Northern Mariana Islands": "MP",
    "Norway": "NO",
    "Oman": "OM",
    "Pakistan": "PK",
    "Palau": "PW",
    "Panama": "PA",
    "Papua New Guinea": "PG",
    "Paraguay": "PY",
    "Peru": "PE",
    "Philippines": "PH",
    "Poland": "PL",
    "Portugal": "PT",
    "Puerto Rico": "PR",
    "Qatar": "QA",
    "Reunion": "RE",
    "Romania": "RO",
    "Russia": "RU",
    "Rwanda": "RW",
    "Saint Helena": "SH",
    "Saint Kitts and Nevis": "KN",
    "Saint Lucia": "LC",
    "Saint Martin": "MF",
    "Saint Pierre and Miquelon": "PM",
    "Saint Vincent and the Grenadines": "VC",
    "Samoa": "WS",
    "San Marino": "SM",
    "Sao Tome and Principe": "ST",
    "Saudi Arabia": "SA",
    "Senegal": "SN",
    "Serbia": "RS",
    "Seychelles": "SC",
    "Sierra Leone": "SL",
    "Singapore": "SG",
    "Sint Maarten": "SX",
    "Slovakia": "SK",
    "Slovenia": "SI",
    "Solomon Islands": "SB",
    "Somalia": "SO",
    "South Africa": "ZA",
    "South Korea": "KR",
    "South Sudan": "SS",
    "Spain": "ES",
    "Sri Lanka": "LK",
    "St. Barts": "BL",
    "Sudan": "SD",
    "Suriname": "SR",
    "Sweden": "SE",
    "Switzerland": "CH",
    "Syria": "SY",
    "Taiwan": "TW",
    "Tajikistan": "TJ",
    "Tanzania": "TZ",
    "Thailand": "TH",
    "Togo": "TG",
    "Tonga": "TO",
    "Trinidad and Tobago": "TT",
    "Tunisia": "TN",
    "Turkey": "TR",
    "Turkmenistan": "TM",
    "Turks and Caicos Islands": "TC",
    "Tuvalu": "TV",
    "US Virgin Islands": "VI",
    "Uganda": "UG",
    "Ukraine": "UA",
    "United Arab Emirates": "AE",
    "United Kingdom": "GB",
    "United States": "US",
    "Uruguay": "UY",
    "Uzbekistan": "UZ",
    "Vanuatu": "VU",
    "Venezuela": "VE",
    "Vietnam": "VN",
    "Wallis and Futuna": "WF",
    "Yemen": "YE",
    "Zambia": "ZM",
    "Zimbabwe": "ZW",
}

# by-date lookups ("what's on December 25th?")
DATE_PRIORITY_CODES: tuple[str, ...] = (
    "US", "GB", "CA", "AU", "IN", "NG", "FR", "DE", "IT", "ES",
    "BR", "MX", "JP", "CN", "ZA", "AR", "RU", "KR", "ID", "SA",
    "AE", "EG", "KE", "GH", "PK", "BD", "VN", "TH", "PH", "MY",
    "SG", "NZ", "IE", "NL", "BE", "CH", "SE", "NO", "DK", "FI",
    "PL", "TR", "IL", "QA", "KW",
)

# by-name searches ("when is Mother's Day?")
SEARCH_PRIORITY_CODES: tuple[str, ...] = (
    "US", "GB", "CA", "AU", "IN", "NG", "ZA", "FR", "DE", "IT",
    "ES", "JP", "CN", "BR", "MX", "AR", "RU", "KR", "ID", "TR",
    "NL", "SE", "NO", "DK", "FI", "PL", "UA", "RO", "CZ", "GR",
    "PT", "BE", "HU", "AT", "CH", "IL", "SG", "MY", "TH", "PH",
    "VN", "PK", "BD", "EG", "SA", "AE", "KE", "GH", "ET", "TZ",
)

# "is today a holiday?"
TODAY_PRIORITY_CODES: tuple[str, ...] = (
    "US", "GB", "CA", "AU", "IN", "NG", "ZA", "FR", "DE", "JP", "CN", "BR",
)


class CountryDirectory:
    """Name/code lookups over a static country table."""

    def __init__(self, table: Optional[dict[str, str]] = None):
        self._table = dict(COUNTRY_CODES if table is None else table)

    def __len__(self) -> int:
        return len(self._table)

    def code_for_name(self, name: str) -> Optional[str]:
        if name in self._table:
            return self._table[name]
        lowered = name.lower()
        for entry_name, code in self._table.items():
            if entry_name.lower() == lowered:
                return code
        return None

    def canonical_name(self, name: str) -> Optional[str]:
        """Return the table's spelling of ``name`` (case-insensitive), if any."""
        if name in self._table:
            return name
        lowered = name.lower()
        for entry_name in self._table:
            if entry_name.lower() == lowered:
                return entry_name
        return None

    def name_for_code(self, code: str) -> Optional[str]:
        upper = code.upper()
        for name, entry_code in self._table.items():
            if entry_code == upper:
                return name
        return None

    def is_supported(self, code: str) -> bool:
        return self.name_for_code(code) is not None

    def search(self, query: str) -> list[CountryEntry]:
        """Substring match on name or code; no ranking."""
        lowered = query.lower()
        return [
            CountryEntry(name=name, code=code)
            for name, code in self._table.items()
            if lowered in name.lower() or lowered in code.lower()
        ]

    def all_entries(self) -> list[CountryEntry]:
        return [CountryEntry(name=name, code=code) for name, code in self._table.items()]

    def supported_codes(self, codes: Iterable[str]) -> list[str]:
        """Keep the codes the table knows about, preserving their order."""
        known = set(self._table.values())
        return [c for c in codes if c in known]
