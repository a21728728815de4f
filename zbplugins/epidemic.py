"""City epidemic statistics: area tree lookup and report text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

API_URL = (
    "https://api.inews.qq.com/newsqa/v1/query/inner/publish/modules/list"
    "?modules=statisGradeCityDetail,diseaseh5Shelf"
)


@dataclass
class Area:
    """Statistics of one region and its sub-regions."""

    name: str = ""
    today_confirm: int = 0
    wzz_add: Any = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list["Area"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Area":
        """Build an area tree from one node of the API's ``areaTree``."""
        today = data.get("today") or {}
        total = data.get("total") or {}
        return cls(
            name=str(data.get("name", "")),
            today_confirm=int(today.get("confirm", 0) or 0),
            wzz_add=today.get("wzz_add"),
            now_confirm=int(total.get("nowConfirm", 0) or 0),
            confirm=int(total.get("confirm", 0) or 0),
            dead=int(total.get("dead", 0) or 0),
            heal=int(total.get("heal", 0) or 0),
            grade=str(total.get("grade", "") or ""),
            wzz=int(total.get("wzz", 0) or 0),
            children=[cls.from_dict(c) for c in data.get("children") or []],
        )


def find_city(area: Area | None, name: str) -> Area | None:
    """Search the tree for an area with this name, or return None."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        if child.name == name:
            return child
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def _show(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def format_report(area: Area, update_time: str) -> str:
    """Render the statistics of one area."""
    return (
        f"【{area.name}】疫情数据\n"
        f"新增人数：{area.today_confirm}\n"
        f"现有确诊：{area.now_confirm}\n"
        f"累计确诊：{area.confirm}\n"
        f"治愈人数：{area.heal}\n"
        f"死亡人数：{area.dead}\n"
        f"无症状人数：{area.wzz}\n"
        f"新增无症状：{_show(area.wzz_add)}\n"
        f"更新时间：\n『{update_time}』"
    )