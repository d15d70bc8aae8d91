"""Discovers ABI artifacts on disk and writes the generated TypeScript files.

``AbiProcessor`` is the file-level driver around the pure code generator.
It reads every JSON artifact below a source directory, groups the parsed
fragments by output file (the artifact's base name), and writes one
TypeScript module per group.

Key Features:
  - Parallel extraction and generation on a thread pool.
  - Per-file and per-unit failures are logged and skipped so one bad
    artifact does not abort the batch.
  - Compiler debug artifacts (``*.dbg.json``) are ignored.
"""
from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from abi2ts.codegen.generator import TypeScriptGenerator
from abi2ts.errors import Abi2TsError, AbiFileError, InvalidParameterError, OutputDirectoryError
from abi2ts.types import Fragment

logger = logging.getLogger(__name__)


class AbiProcessor:
    """Collects ABI fragments per output file and generates TypeScript for them."""

    def __init__(
        self,
        out_dir: Union[str, Path],
        *,
        extension: str = ".ts",
        debug_suffix: str = ".dbg.json",
        max_workers: Optional[int] = None,
    ) -> None:
        """
        Initialize the AbiProcessor.

        Args:
            out_dir: Directory the generated files are written to.
            extension: Extension of the generated files, including the dot.
            debug_suffix: File-name ending of artifacts to ignore.
            max_workers: Size of the worker pool; None uses the executor default.

        Raises:
            InvalidParameterError: If out_dir is empty.
        """
        if not str(out_dir):
            raise InvalidParameterError("out_dir must be provided")

        self._out_dir = Path(out_dir)
        self._extension = extension
        self._debug_suffix = debug_suffix
        self._max_workers = max_workers
        self._abis_by_file: Dict[Path, List[Fragment]] = {}

    @property
    def out_dir(self) -> Path:
        return self._out_dir

    @property
    def output_units(self) -> Mapping[Path, List[Fragment]]:
        """Read-only view of the collected fragments keyed by output path."""
        return MappingProxyType(self._abis_by_file)

    def discover(self, source_dir: Union[str, Path], pattern: str = "**/*.json") -> List[Path]:
        """
        Find the artifact files below a source directory.

        Args:
            source_dir: Directory to search.
            pattern: Glob pattern relative to source_dir.

        Returns:
            Matching files in sorted order, without debug artifacts.

        Raises:
            InvalidParameterError: If source_dir is not an existing directory.
        """
        source = Path(source_dir)
        if not source.is_dir():
            raise InvalidParameterError(f"Source directory does not exist: {source}")

        return sorted(
            path for path in source.glob(pattern)
            if path.is_file() and not path.name.endswith(self._debug_suffix)
        )

    def output_path_for(self, path: Union[str, Path]) -> Path:
        """Map an input artifact to its output file; only the base name counts."""
        return self._out_dir / f"{Path(path).stem}{self._extension}"

    @staticmethod
    def parse_fragments(data: Any) -> List[Fragment]:
        """
        Parse the fragments found under the ``"abi"`` key of an artifact.

        Entries that do not validate as a Fragment are skipped.

        Args:
            data: The decoded JSON document.

        Returns:
            The parsed fragments in document order; empty if there is no
            ``"abi"`` array.
        """
        abi = data.get("abi") if isinstance(data, dict) else None
        if not isinstance(abi, list):
            return []

        fragments = []
        for index, entry in enumerate(abi):
            try:
                fragments.append(Fragment.model_validate(entry))
            except ValidationError as e:
                logger.debug("Skipping ABI entry %d: %s", index, e.errors(include_url=False))
        return fragments

    def extract_abis_from_file(self, path: Union[str, Path]) -> Tuple[Path, List[Fragment]]:
        """
        Read one artifact and parse its fragments.

        Args:
            path: The artifact file.

        Returns:
            A tuple of (output path, fragments).

        Raises:
            AbiFileError: If the file cannot be read or is not valid JSON.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise AbiFileError(f"Failed to read ABI artifact {path}: {e}", str(path)) from e

        return self.output_path_for(path), self.parse_fragments(data)

    def add_fragments(self, output_path: Path, fragments: List[Fragment]) -> None:
        """Append fragments to the unit written to output_path."""
        if fragments:
            self._abis_by_file.setdefault(Path(output_path), []).extend(fragments)

    def _try_extract(self, path: Path) -> Optional[Tuple[Path, List[Fragment]]]:
        try:
            return self.extract_abis_from_file(path)
        except AbiFileError as e:
            logger.warning("Skipping %s: %s", path, e)
            return None

    def collect_abi_files(self, source_dir: Union[str, Path], pattern: str = "**/*.json") -> int:
        """
        Extract fragments from every artifact below source_dir.

        Files are read in parallel; results are merged in sorted path order so
        same-named artifacts from different directories always merge the same
        way.

        Args:
            source_dir: Directory to search.
            pattern: Glob pattern relative to source_dir.

        Returns:
            The number of files that contributed at least one fragment.

        Raises:
            InvalidParameterError: If source_dir is not an existing directory.
        """
        entries = self.discover(source_dir, pattern)

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            results = list(pool.map(self._try_extract, entries))

        contributed = 0
        for entry, result in zip(entries, results):
            if result is None:
                continue
            output_path, fragments = result
            if not fragments:
                logger.debug("No ABI fragments in %s", entry)
                continue
            logger.info("Collected %d fragments from %s", len(fragments), entry)
            self.add_fragments(output_path, fragments)
            contributed += 1

        return contributed

    @staticmethod
    def deduplicate_abis(fragments: List[Fragment]) -> List[Fragment]:
        """Keep the first fragment for each unique key, preserving order."""
        unique = []
        seen = set()
        for fragment in fragments:
            key = fragment.get_unique_key()
            if key not in seen:
                seen.add(key)
                unique.append(fragment)
        return unique

    def _generate_unit(self, output_path: Path, fragments: List[Fragment]) -> Optional[Path]:
        try:
            content = TypeScriptGenerator.generate_file_content(self.deduplicate_abis(fragments))
            if content is None:
                logger.debug("Nothing to generate for %s", output_path)
                return None
            output_path.write_text(content, encoding="utf-8")
        except (Abi2TsError, OSError) as e:
            logger.warning("Failed to generate %s: %s", output_path, e)
            return None
        return output_path

    def generate_typescript_files(self) -> List[Path]:
        """
        Generate and write one TypeScript file per collected unit.

        Returns:
            The written files, sorted.

        Raises:
            OutputDirectoryError: If the output directory cannot be created.
        """
        try:
            self._out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Cannot create output directory {self._out_dir}: {e}") from e

        units = list(self._abis_by_file.items())
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            written = list(pool.map(lambda unit: self._generate_unit(*unit), units))

        return sorted(path for path in written if path is not None)
