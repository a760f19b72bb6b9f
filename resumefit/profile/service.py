"""Profile loading and validation utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from resumefit.profile.models import ResumeProfile

logger = logging.getLogger(__name__)


class ProfileService:
    """Loads a ResumeProfile from YAML or JSON on disk."""

    def load_profile(self, path: Path | str) -> ResumeProfile:
        """Load and validate a profile.

        ``.yaml``/``.yml`` and ``.json`` are parsed directly; any other suffix
        is sniffed (JSON if it looks like an object, YAML otherwise).

        Raises:
            FileNotFoundError: The file does not exist.
            ValueError: The file is not a mapping or fails model validation.
        """
        profile_path = Path(path)
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile_path}")

        suffix = profile_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(profile_path)
        elif suffix == ".json":
            data = self._load_json(profile_path)
        else:
            data = self._load_unknown(profile_path)

        try:
            profile = ResumeProfile.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid profile {profile_path}: {e}") from e

        logger.debug(
            f"Loaded profile from {profile_path}: "
            f"{len(profile.experiences)} experiences, {len(profile.projects)} projects"
        )
        return profile

    def validate_profile(self, profile: ResumeProfile) -> list[str]:
        """Return warnings for incomplete profiles."""
        warnings: list[str] = []

        if not profile.contact.full_name.strip():
            warnings.append("Missing full name")
        if not profile.contact.email.strip():
            warnings.append("Missing email address")
        if not profile.contact.phone:
            warnings.append("Missing phone number")
        if not profile.experiences:
            warnings.append("No work experience entries")
        if not profile.skill_tokens():
            warnings.append("Skills list is empty")

        return warnings

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profile: {path}") from e

        return self._ensure_mapping(data, path)

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON profile: {path}") from e

        return self._ensure_mapping(data, path)

    def _load_unknown(self, path: Path) -> dict:
        raw = path.read_text(encoding="utf-8")

        if raw.lstrip().startswith(("{", "[")):
            try:
                return self._ensure_mapping(json.loads(raw), path)
            except json.JSONDecodeError:
                pass

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile format: {path}") from e

        return self._ensure_mapping(data, path)

    @staticmethod
    def _ensure_mapping(data: object, path: Path) -> dict:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data
