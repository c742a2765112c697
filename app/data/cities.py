from types import MappingProxyType
from typing import Mapping

# Keys must stay in sync with the frontend's city ids.
CITY_NAME_MAPPING: Mapping[str, str] = MappingProxyType({
    "taipei": "臺北市",
    "newtaipei": "新北市",
    "taoyuan": "桃園市",
    "taichung": "臺中市",
    "tainan": "臺南市",
    "kaohsiung": "高雄市",
})


def supported_city_ids() -> list[str]:
    return list(CITY_NAME_MAPPING)
