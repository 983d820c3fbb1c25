"""
================================================================================
Credential Loader Module
================================================================================

Loads login scenarios (credential records) from YAML files for data-driven
tests.

File format:

    credentials:
      - name: standard_user_logs_in
        username: standard_user
        password: ${env.SAUCE_PASSWORD}
        expect: success
        tags: [smoke]

A file may also hold a single mapping instead of a `credentials` list.

Key Features:
- Immutable records with mapping-style access (record["username"])
- ${env.NAME} and ${var} interpolation
- Tag filtering

================================================================================
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml
from loguru import logger


EXPECTATIONS = ("success", "error")


# ================================================================================
# Data Model
# ================================================================================

@dataclass(frozen=True)
class CredentialRecord(Mapping):
    """One login scenario: the credential fields plus scenario metadata."""
    name: str
    username: str
    password: str
    expect: str = "success"
    tags: Tuple[str, ...] = field(default_factory=tuple)

    FIELDS = ("username", "password")

    def __getitem__(self, key: str) -> str:
        if key not in self.FIELDS:
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.FIELDS)

    def __len__(self) -> int:
        return len(self.FIELDS)

    @property
    def expects_error(self) -> bool:
        return self.expect == "error"

    def __repr__(self) -> str:
        return f"CredentialRecord(name={self.name!r}, username={self.username!r}, expect={self.expect!r})"


# ================================================================================
# Credential Loader
# ================================================================================

class CredentialLoader:
    """
    Loads CredentialRecords from YAML files.

    Example:
        loader = CredentialLoader("testsuites/ui_testing/data")
        for record in loader.load_all():
            print(record.name, record["username"])
    """

    # Variable pattern for interpolation
    VARIABLE_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(self, data_directory: Union[str, Path]):
        """
        Args:
            data_directory: Directory containing credential YAML files
        """
        self.data_dir = Path(data_directory)
        self.global_variables: Dict[str, Any] = {}
        self.loaded_records: List[CredentialRecord] = []

    def set_global_variables(self, variables: Dict[str, Any]) -> None:
        """Set variables available to ${var} placeholders."""
        self.global_variables.update(variables)

    def load_file(self, file_path: Union[str, Path]) -> List[CredentialRecord]:
        """
        Load credential records from a single YAML file.

        Returns:
            Records parsed from the file; empty if the file is missing or invalid
        """
        file_path = Path(file_path)

        if not file_path.exists():
            logger.error(f"Credential file not found: {file_path}")
            return []

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {file_path}: {e}")
            return []

        if content is None:
            logger.warning(f"Empty YAML file: {file_path}")
            return []

        entries = content.get('credentials', [content]) if isinstance(content, dict) else content
        if not isinstance(entries, list):
            entries = [entries]

        records = []
        for position, entry in enumerate(entries):
            record = self._parse_record(entry, file_path, position)
            if record:
                records.append(record)

        logger.info(f"Loaded {len(records)} credential records from {file_path.name}")
        return records

    def load_all(self, pattern: str = "*.yaml") -> List[CredentialRecord]:
        """Load records from every YAML file in the data directory."""
        if not self.data_dir.exists():
            logger.error(f"Credential directory not found: {self.data_dir}")
            return []

        yaml_files = set(self.data_dir.glob(pattern))
        yaml_files.update(self.data_dir.glob("*.yml"))

        all_records = []
        for file_path in sorted(yaml_files):
            all_records.extend(self.load_file(file_path))

        self.loaded_records = all_records
        logger.info(f"Total loaded credential records: {len(all_records)}")
        return all_records

    def load_by_tags(self, tags: List[str]) -> List[CredentialRecord]:
        """Records carrying any of the given tags."""
        if not self.loaded_records:
            self.load_all()

        return [
            record for record in self.loaded_records
            if any(tag in record.tags for tag in tags)
        ]

    def _parse_record(self, data: Any, source_file: Path, position: int) -> Optional[CredentialRecord]:
        if not isinstance(data, dict):
            logger.warning(f"Skipping non-mapping entry #{position} in {source_file}")
            return None

        missing = [key for key in CredentialRecord.FIELDS if key not in data]
        if missing:
            logger.warning(f"Skipping entry #{position} in {source_file}: missing {', '.join(missing)}")
            return None

        expect = str(data.get('expect', 'success')).lower()
        if expect not in EXPECTATIONS:
            logger.warning(f"Skipping entry #{position} in {source_file}: unknown expect '{expect}'")
            return None

        username = self._interpolate_string(str(data['username'] or ""))
        return CredentialRecord(
            name=str(data.get('name') or f"{source_file.stem}_{position}"),
            username=username,
            password=self._interpolate_string(str(data['password'] or "")),
            expect=expect,
            tags=self._parse_tags(data.get('tags'), source_file, position),
        )

    @staticmethod
    def _parse_tags(value: Any, source_file: Path, position: int) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(str(tag) for tag in value)
        logger.warning(f"Ignoring tags of entry #{position} in {source_file}: expected a list, got {type(value).__name__}")
        return ()

    def _interpolate_string(self, text: str) -> str:
        def replace_var(match):
            var_name = match.group(1)

            if var_name.startswith('env.'):
                return os.environ.get(var_name[4:], match.group(0))

            return str(self.global_variables.get(var_name, match.group(0)))

        return self.VARIABLE_PATTERN.sub(replace_var, text)


__all__ = [
    "CredentialLoader",
    "CredentialRecord",
]
