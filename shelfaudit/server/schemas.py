from typing import Any

from pydantic import BaseModel, Field, model_validator


class ExportCodesRequest(BaseModel):
    issues: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Issue objects as returned in an audit report.",
    )
    label: str = Field(default="products", examples=["seo-problems"])

    @model_validator(mode="before")
    @classmethod
    def _accept_report(cls, data: Any) -> Any:
        """Accept a whole ``report`` payload in place of a flat issue list."""
        if isinstance(data, dict) and "report" in data and "issues" not in data:
            report = data.pop("report") or {}
            by_dimension = report.get("issues") if isinstance(report, dict) else None
            if isinstance(by_dimension, dict):
                data["issues"] = [issue for issues in by_dimension.values() for issue in issues or []]
        return data


__all__ = ["ExportCodesRequest"]
