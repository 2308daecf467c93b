"""
Province Registry
Vehicle plate province codes of the Democratic Republic of the Congo.
"""

from typing import Optional

PROVINCE_CODES = {
    "01": "Kinshasa",
    "02": "Kongo Central",
    "03": "Kwango",
    "04": "Kwilu",
    "05": "Mai-Ndombe",
    "06": "Kasaï",
    "07": "Kasaï-Central",
    "08": "Kasaï-Oriental",
    "09": "Lomami",
    "10": "Sankuru",
    "11": "Maniema",
    "12": "Sud-Kivu",
    "13": "Nord-Kivu",
    "14": "Ituri",
    "15": "Haut-Uélé",
    "16": "Tshopo",
    "17": "Bas-Uélé",
    "18": "Nord-Ubangi",
    "19": "Mongala",
    "20": "Sud-Ubangi",
    "21": "Équateur",
    "22": "Tshuapa",
    "23": "Tanganyika",
    "24": "Haut-Lomami",
    "25": "Lualaba",
    "26": "Haut-Katanga",
}


def province_for_code(code: Optional[str]) -> Optional[str]:
    """Return the province name for a two-digit code, or None if unknown."""
    if not code:
        return None
    return PROVINCE_CODES.get(code)
