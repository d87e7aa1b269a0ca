"""Driver form: submit-time validation and payload cleanup for the UI."""
from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fleet.core.config import settings
from fleet.domain import rules
from fleet.domain.entities.driver import DriverStatus
from fleet.web import masks

PHOTO_TYPE = "Photo must be an image (JPG, PNG or GIF)"
PDF_TYPE = "CNH document must be a PDF"


@dataclass
class Upload:
    filename: str
    content_type: str
    data: bytes


@dataclass
class DriverForm:
    name: str = ""
    cpf: str = ""
    phone: str = ""
    cnh_number: str = ""
    cnh_category: List[str] = field(default_factory=list)
    status: str = DriverStatus.active.value
    photo: Optional[Upload] = None
    cnh_pdf: Optional[Upload] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_driver(cls, row: Mapping[str, Any]) -> "DriverForm":
        """Prefill from an API row (camelCase keys), masking digit fields."""
        return cls(
            name=row.get("name") or "",
            cpf=masks.mask_cpf(row.get("cpf")),
            phone=masks.mask_phone(row.get("phone")),
            cnh_number=masks.mask_cnh(row.get("cnhNumber")),
            cnh_category=rules.split_categories(row.get("cnhCategory")),
            status=row.get("status") or DriverStatus.active.value,
        )

    def validate(self) -> bool:
        # first failing rule per field wins
        checks = {
            "name": rules.check_name(self.name),
            "cpf": rules.check_cpf(self.cpf),
            "phone": rules.check_phone(self.phone),
            "cnh_number": rules.check_cnh_number(self.cnh_number),
            "cnh_category": rules.check_categories(self.cnh_category),
            "status": [] if self.status in {s.value for s in DriverStatus} else ["Invalid status"],
            "photo": self._check_photo(),
            "cnh_pdf": self._check_cnh_pdf(),
        }
        self.errors = {k: v[0] for k, v in checks.items() if v}
        return not self.errors

    def _check_photo(self) -> List[str]:
        if self.photo is None:
            return []
        if self.photo.content_type not in rules.ALLOWED_PHOTO_TYPES:
            return [PHOTO_TYPE]
        if len(self.photo.data) > settings.max_photo_bytes:
            return [f"Photo must be at most {settings.max_photo_bytes // (1024 * 1024)}MB"]
        return []

    def _check_cnh_pdf(self) -> List[str]:
        if self.cnh_pdf is None:
            return []
        if self.cnh_pdf.content_type != rules.CNH_PDF_TYPE:
            return [PDF_TYPE]
        if len(self.cnh_pdf.data) > settings.max_cnh_pdf_bytes:
            return [f"CNH PDF must be at most {settings.max_cnh_pdf_bytes // (1024 * 1024)}MB"]
        return []

    def payload(self, driver_id: Optional[int] = None) -> Dict[str, Any]:
        clean: Dict[str, Any] = {
            "name": self.name,
            "cpf": rules.only_digits(self.cpf),
            "phone": rules.only_digits(self.phone),
            "cnhNumber": rules.only_digits(self.cnh_number),
            "cnhCategory": rules.join_categories(self.cnh_category),
            "status": self.status,
        }
        if driver_id is not None:
            clean["id"] = driver_id
        return clean

    @property
    def photo_preview(self) -> Optional[str]:
        if self.photo is None or self.photo.content_type not in rules.ALLOWED_PHOTO_TYPES:
            return None
        encoded = base64.b64encode(self.photo.data).decode("ascii")
        return f"data:{self.photo.content_type};base64,{encoded}"

    @property
    def cnh_pdf_name(self) -> Optional[str]:
        return self.cnh_pdf.filename if self.cnh_pdf else None

    def masked(self) -> Dict[str, str]:
        """Display values; a field that failed validation keeps what was typed."""
        shown = {
            "cpf": (self.cpf, masks.mask_cpf),
            "phone": (self.phone, masks.mask_phone),
            "cnh_number": (self.cnh_number, masks.mask_cnh),
        }
        return {k: raw if k in self.errors else mask(raw) for k, (raw, mask) in shown.items()}
