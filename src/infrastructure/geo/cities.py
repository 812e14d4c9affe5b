"""Static reference data for the supported cities."""
from __future__ import annotations

from typing import Mapping

# canonical key -> (display name, latitude, longitude)
CITY_COORDINATES: Mapping[str, tuple[str, float, float]] = {
    "delhi": ("Delhi", 28.6139, 77.2090),
    "mumbai": ("Mumbai", 19.0760, 72.8777),
    "bangalore": ("Bangalore", 12.9716, 77.5946),
    "chennai": ("Chennai", 13.0827, 80.2707),
    "kolkata": ("Kolkata", 22.5726, 88.3639),
    "hyderabad": ("Hyderabad", 17.3850, 78.4867),
    "pune": ("Pune", 18.5204, 73.8567),
    "ahmedabad": ("Ahmedabad", 23.0225, 72.5714),
    "jaipur": ("Jaipur", 26.9124, 75.7873),
    "lucknow": ("Lucknow", 26.8467, 80.9462),
    "gurgaon": ("Gurgaon", 28.4595, 77.0266),
    "noida": ("Noida", 28.5355, 77.3910),
    "ghaziabad": ("Ghaziabad", 28.6692, 77.4538),
    "faridabad": ("Faridabad", 28.4089, 77.3178),
    "navi mumbai": ("Navi Mumbai", 19.0330, 73.0297),
    "thane": ("Thane", 19.2183, 72.9781),
    "chandigarh": ("Chandigarh", 30.7333, 76.7794),
    "kochi": ("Kochi", 9.9312, 76.2673),
    "thiruvananthapuram": ("Thiruvananthapuram", 8.5241, 76.9366),
    "coimbatore": ("Coimbatore", 11.0168, 76.9558),
    "mysore": ("Mysore", 12.2958, 76.6394),
    "visakhapatnam": ("Visakhapatnam", 17.6868, 83.2185),
    "indore": ("Indore", 22.7196, 75.8577),
    "bhopal": ("Bhopal", 23.2599, 77.4126),
    "nagpur": ("Nagpur", 21.1458, 79.0882),
    "surat": ("Surat", 21.1702, 72.8311),
    "vadodara": ("Vadodara", 22.3072, 73.1812),
    "patna": ("Patna", 25.5941, 85.1376),
    "varanasi": ("Varanasi", 25.3176, 82.9739),
    "prayagraj": ("Prayagraj", 25.4358, 81.8463),
    "goa": ("Goa", 15.4909, 73.8278),
}

# spelling variant -> canonical key
CITY_ALIASES: Mapping[str, str] = {
    "new delhi": "delhi",
    "delhi ncr": "delhi",
    "bombay": "mumbai",
    "bengaluru": "bangalore",
    "banglore": "bangalore",
    "madras": "chennai",
    "calcutta": "kolkata",
    "secunderabad": "hyderabad",
    "poona": "pune",
    "amdavad": "ahmedabad",
    "gurugram": "gurgaon",
    "cochin": "kochi",
    "ernakulam": "kochi",
    "trivandrum": "thiruvananthapuram",
    "mysuru": "mysore",
    "vizag": "visakhapatnam",
    "baroda": "vadodara",
    "banaras": "varanasi",
    "benares": "varanasi",
    "allahabad": "prayagraj",
    "panaji": "goa",
    "panjim": "goa",
}

# short forms accepted on lookup but too ambiguous to scan for inside addresses
CITY_ABBREVIATIONS: Mapping[str, str] = {
    "ncr": "delhi",
    "bom": "mumbai",
    "blr": "bangalore",
    "hyd": "hyderabad",
    "tvm": "thiruvananthapuram",
}

# address substrings whose display form differs from the canonical city name
LOCALITY_DISPLAY_NAMES: Mapping[str, str] = {
    "new delhi": "New Delhi",
    "secunderabad": "Secunderabad",
}


__all__ = ["CITY_ABBREVIATIONS", "CITY_ALIASES", "CITY_COORDINATES", "LOCALITY_DISPLAY_NAMES"]
