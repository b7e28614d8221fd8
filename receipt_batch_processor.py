"""
Receipt Batch Processor for categorising extracted receipts.
Reads JSON receipts (loose or zipped), assigns item categories and
classifies per-file failures.
"""

import json
import logging
import math
import zipfile
import io
import os
import re
from typing import Dict, List, Optional, Tuple, Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
import traceback

from receipt_engine.categorisation.engine import ReceiptCategorizer, Confidence
from receipt_engine.categorisation.preprocess import (
    normalize_locale,
    normalize_description_key,
    normalize_store_key,
)
from receipt_engine.categorisation.registry import build_category_registry, CategoryLabelResolver
from receipt_engine.config.categorizer_config import CATEGORIZER_CONFIG, DEFAULT_RECEIPT_CATEGORIES
from receipt_engine.config.taxonomy_loader import build_broad_type_map

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}(:\d{2})?$")


class InvalidReceiptStructureError(Exception):
    """Raised when JSON structure cannot be normalized to a receipt."""
    pass


def parse_number(value) -> float:
    """
    Parse a receipt amount leniently.

    Accepts numbers and strings with a comma decimal separator or currency
    noise ("1,25 €"). Anything unparseable is 0.0.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    if isinstance(value, str):
        cleaned = re.sub(r"[^0-9.+-]", "", value.replace(",", ".", 1))
        try:
            number = float(cleaned)
        except ValueError:
            return 0.0
        return number if math.isfinite(number) else 0.0
    return 0.0


def normalize_receipt_date(value) -> Optional[str]:
    """Return a YYYY-MM-DD date string, or None if malformed."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not _DATE_RE.match(trimmed):
        return None
    return trimmed


def normalize_receipt_time(value) -> Optional[str]:
    """Return an HH:MM:SS time string, or None if malformed."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not _TIME_RE.match(trimmed):
        return None
    return f"{trimmed}:00" if len(trimmed) == 5 else trimmed


@dataclass
class ProcessingError:
    """A receipt file that could not be processed."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class ProcessedReceipt:
    """A categorised receipt."""
    receipt_ref: str
    store_name: Optional[str]
    receipt_date: str
    receipt_time: str
    currency: str
    total_amount: float
    locale: str
    items: List[Dict] = field(default_factory=list)
    category_summary: Dict = field(default_factory=dict)


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Item counts
    total_items: int = 0
    strong_suggestions: int = 0
    weak_suggestions: int = 0
    preference_matches: int = 0
    heuristic_overrides: int = 0
    uncategorised: int = 0

    total_amount: float = 0.0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful / self.total_files) * 100

    @property
    def categorisation_rate(self) -> float:
        """Percentage of items that ended up with a category other than the fallback."""
        if self.total_items == 0:
            return 0.0
        return ((self.total_items - self.uncategorised) / self.total_items) * 100


@dataclass
class BatchResult:
    """Receipts, errors and stats for one batch."""
    stats: BatchStats
    results: List[ProcessedReceipt]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def merge_results(result1: 'BatchResult', result2: 'BatchResult') -> 'BatchResult':
        """
        Combine two batch results, e.g. an earlier upload and a new one.

        Args:
            result1: Result accumulated so far
            result2: Result of the batch being added

        Returns:
            BatchResult with summed stats, concatenated receipts and errors
        """
        merged_stats = BatchStats()

        for name in (
            "total_files", "processed", "successful", "failed",
            "total_items", "strong_suggestions", "weak_suggestions",
            "preference_matches", "heuristic_overrides", "uncategorised",
        ):
            setattr(merged_stats, name, getattr(result1.stats, name) + getattr(result2.stats, name))
        merged_stats.total_amount = round(result1.stats.total_amount + result2.stats.total_amount, 2)

        # Span from the earliest start to the latest end
        starts = [s for s in (result1.stats.start_time, result2.stats.start_time) if s]
        ends = [e for e in (result1.stats.end_time, result2.stats.end_time) if e]
        merged_stats.start_time = min(starts) if starts else None
        merged_stats.end_time = max(ends) if ends else None

        merged_error_summary = dict(result1.error_summary)
        for error_type, count in result2.error_summary.items():
            merged_error_summary[error_type] = merged_error_summary.get(error_type, 0) + count

        return BatchResult(
            stats=merged_stats,
            results=result1.results + result2.results,
            errors=result1.errors + result2.errors,
            error_summary=merged_error_summary
        )


class ReceiptBatchProcessor:
    """Batch processor for extracted receipts."""

    def __init__(
        self,
        taxonomy: Optional[List[Dict]] = None,
        default_locale: Optional[str] = None,
        item_preferences: Optional[Dict[str, str]] = None,
        debug_mode: bool = False
    ):
        """
        Initialize the batch processor.

        Args:
            taxonomy: Category rows with name and broad_type
                (defaults to DEFAULT_RECEIPT_CATEGORIES)
            default_locale: Locale used when a receipt carries none
            item_preferences: "store_key::description_key" -> category name,
                as built by add_item_preference
            debug_mode: Log every rule that fires
        """
        rows = DEFAULT_RECEIPT_CATEGORIES if taxonomy is None else taxonomy
        category_names = [row["name"] for row in rows if row.get("name")]

        # Built once for the whole batch
        self.registry = build_category_registry(category_names)
        self.label_resolver = CategoryLabelResolver(category_names)
        self.categorizer = ReceiptCategorizer(
            debug_mode=debug_mode,
            broad_types=build_broad_type_map(rows)
        )
        self.default_locale = normalize_locale(default_locale)
        self.item_preferences: Dict[str, str] = dict(item_preferences or {})
        self.fallback_category = self.registry.get(CATEGORIZER_CONFIG["fallback_category"].lower())

        logger.info(
            f"Initialized receipt batch processor: {len(self.registry)} categories, "
            f"default locale={self.default_locale}, {len(self.item_preferences)} item preferences"
        )

    def add_item_preference(
        self,
        description: str,
        category: str,
        store_name: Optional[str] = None
    ) -> None:
        """
        Remember the category a user chose for an item.

        Preferences without a store apply to every store.
        """
        description_key = normalize_description_key(description)
        if not description_key:
            raise ValueError(f"Cannot build a preference key for description: {description!r}")
        store_key = normalize_store_key(store_name)
        self.item_preferences[f"{store_key}::{description_key}"] = category

    def _preferred_category(self, store_key: str, description: str) -> Optional[str]:
        description_key = normalize_description_key(description)
        if not description_key:
            return None
        return (
            self.item_preferences.get(f"{store_key}::{description_key}")
            or self.item_preferences.get(f"::{description_key}")
        )

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        locale: Optional[str] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Process a batch of receipt files.

        Args:
            files: List of (filename, content) tuples
            locale: Locale for receipts that carry none (or the default)
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        batch_locale = normalize_locale(locale) if locale else self.default_locale

        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(files)} receipts")

        for idx, (filename, content) in enumerate(files):
            error_type = None
            error_message = None
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Processing: {filename}")

                logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

                receipt = self._process_single_receipt(
                    filename=filename,
                    content=content,
                    locale=batch_locale
                )

                results.append(receipt)
                stats.processed += 1
                stats.successful += 1
                self._update_item_stats(stats, receipt)

            except json.JSONDecodeError as e:
                error_type = "JSON_PARSE_ERROR"
                error_message = f"Invalid JSON: {str(e)}"
                logger.error(f"JSON parse error in {filename}: {e}")

            except KeyError as e:
                error_type = "MISSING_DATA"
                error_message = f"Missing required field: {str(e)}"
                logger.error(f"Missing data in {filename}: {e}")

            except InvalidReceiptStructureError as e:
                error_type = "INVALID_RECEIPT_STRUCTURE"
                error_message = str(e)
                logger.error(f"Invalid receipt structure in {filename}: {e}")

            except ValueError as e:
                error_type = "DATA_VALIDATION_ERROR"
                error_message = str(e)
                logger.error(f"Data validation error in {filename}: {e}")

            except Exception as e:
                error_type = "PROCESSING_ERROR"
                error_message = f"{type(e).__name__}: {str(e)}"
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")

            if error_type is not None:
                errors.append(ProcessingError(
                    file_name=filename,
                    error_type=error_type,
                    error_message=error_message
                ))
                stats.failed += 1
                stats.processed += 1
                error_types[error_type] = error_types.get(error_type, 0) + 1

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} successful, "
            f"{stats.total_items} items ({stats.categorisation_rate:.1f}% categorised), "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def _update_item_stats(self, stats: BatchStats, receipt: ProcessedReceipt) -> None:
        stats.total_amount = round(stats.total_amount + receipt.total_amount, 2)
        for item in receipt.items:
            stats.total_items += 1
            if item["category_source"] == "preference":
                stats.preference_matches += 1
            elif item["category_source"] == "heuristic":
                stats.heuristic_overrides += 1
            if item["confidence"] == Confidence.STRONG.value:
                stats.strong_suggestions += 1
            elif item["confidence"] == Confidence.WEAK.value:
                stats.weak_suggestions += 1
            if item["category"] is None or item["category"] == self.fallback_category:
                stats.uncategorised += 1

    def _decode_json(self, content: bytes):
        """Parse JSON with fallback encoding handling."""
        try:
            return json.loads(content.decode("utf-8"))
        except UnicodeDecodeError:
            # Fallback to cp1252 for Windows-encoded receipts
            try:
                return json.loads(content.decode("cp1252"))
            except UnicodeDecodeError:
                # latin-1 maps every byte
                return json.loads(content.decode("latin-1"))

    def _process_single_receipt(
        self,
        filename: str,
        content: bytes,
        locale: str
    ) -> ProcessedReceipt:
        """Process a single receipt file."""
        data = self._decode_json(content)
        receipt = self._normalize_receipt_structure(data, filename)

        raw_items = receipt.get("items")
        if raw_items is None:
            raise KeyError("items")
        if not isinstance(raw_items, list):
            raise InvalidReceiptStructureError(
                f"'items' in {filename} must be a list, got {type(raw_items).__name__}"
            )

        receipt_locale = normalize_locale(receipt.get("locale")) if receipt.get("locale") else locale

        store_name = receipt.get("store_name")
        store_name = store_name.strip() if isinstance(store_name, str) and store_name.strip() else None
        store_key = normalize_store_key(store_name)

        currency = receipt.get("currency")
        currency = (
            currency.strip().upper()
            if isinstance(currency, str) and currency.strip()
            else CATEGORIZER_CONFIG["receipt_defaults"]["currency"]
        )

        now = datetime.now()
        receipt_date = normalize_receipt_date(receipt.get("receipt_date")) or now.strftime("%Y-%m-%d")
        receipt_time = normalize_receipt_time(receipt.get("receipt_time")) or now.strftime("%H:%M:%S")

        items = []
        for idx, raw_item in enumerate(raw_items):
            if not isinstance(raw_item, dict):
                logger.warning(f"{filename}: skipping item {idx}, not an object")
                continue
            item = self._build_item(raw_item, store_key, receipt_locale)
            if item is not None:
                items.append(item)

        if not items:
            raise ValueError("No items with a description found in receipt")

        summed_total = sum(item["total_price"] for item in items)
        total_amount = round(max(parse_number(receipt.get("total_amount")), summed_total), 2)

        return ProcessedReceipt(
            receipt_ref=Path(filename).stem,
            store_name=store_name,
            receipt_date=receipt_date,
            receipt_time=receipt_time,
            currency=currency,
            total_amount=total_amount,
            locale=receipt_locale,
            items=items,
            category_summary=self.categorizer.get_category_summary(items),
        )

    def _build_item(
        self,
        raw_item: Dict,
        store_key: str,
        locale: str
    ) -> Optional[Dict]:
        """Normalize one extracted item and assign its category."""
        description = raw_item.get("description")
        description = description.strip() if isinstance(description, str) else ""
        if not description:
            return None

        quantity = max(1.0, parse_number(raw_item.get("quantity")) or 1.0)
        total_price = parse_number(raw_item.get("total_price"))
        price_per_unit = parse_number(raw_item.get("price_per_unit"))

        if price_per_unit <= 0 and total_price > 0:
            price_per_unit = total_price / quantity
        if total_price <= 0 and price_per_unit > 0:
            total_price = price_per_unit * quantity

        raw_category = raw_item.get("category")
        upstream = self.label_resolver.resolve(raw_category) if isinstance(raw_category, str) else None

        suggestion = None
        preferred = self._preferred_category(store_key, description)
        if preferred:
            category = self.registry.get(preferred.strip().lower(), self.fallback_category)
            source = "preference"
        else:
            category, suggestion = self.categorizer.reconcile_item_category(
                description, upstream, self.registry, locale
            )
            if suggestion is not None and category == suggestion.category and category != upstream:
                source = "heuristic"
            elif upstream is not None:
                source = "upstream"
            else:
                source = "fallback"

        return {
            "description": description,
            "quantity": quantity,
            "price_per_unit": round(price_per_unit, 2),
            "total_price": round(total_price, 2),
            "upstream_category": raw_category if isinstance(raw_category, str) else None,
            "category": category,
            "category_source": source,
            "confidence": suggestion.confidence.value if suggestion else None,
            "score": suggestion.score if suggestion else None,
            "reason": suggestion.reason if suggestion else None,
        }

    def _normalize_receipt_structure(self, data, filename: str) -> Dict:
        """
        Normalize different extraction outputs to a receipt dictionary.

        Handles:
        - Dictionary with 'items' at the root (standard format)
        - Dictionary wrapping the receipt under 'receipt', 'extracted' or 'data'
        - Root-level list of item objects

        Raises:
            InvalidReceiptStructureError: If structure cannot be normalized
        """
        if isinstance(data, dict):
            if "items" in data:
                return data
            for key in ("receipt", "extracted", "data"):
                nested = data.get(key)
                if isinstance(nested, dict) and "items" in nested:
                    logger.info(f"{filename}: Found receipt under key '{key}'")
                    return nested
            return data

        if isinstance(data, list):
            if len(data) == 0:
                raise InvalidReceiptStructureError(f"Empty array in JSON file: {filename}")
            if all(isinstance(item, dict) for item in data) and any("description" in item for item in data):
                logger.info(f"{filename}: Root-level array detected as item list ({len(data)} items)")
                return {"items": data}
            raise InvalidReceiptStructureError(
                f"Unrecognized JSON array structure in {filename}. "
                f"Expected item objects with a 'description'."
            )

        raise InvalidReceiptStructureError(
            f"Unexpected JSON root type in {filename}: {type(data).__name__}. "
            f"Expected dict or list."
        )

    def load_files(self, paths: List[str]) -> List[Tuple[str, bytes]]:
        """
        Load receipt files from disk.
        JSON files are read as-is; ZIP archives contribute their JSON members.

        Args:
            paths: File paths

        Returns:
            List of (filename, content) tuples
        """
        all_files = []

        for path in paths:
            filename = os.path.basename(path)
            if filename.lower().endswith(".zip"):
                logger.info(f"Extracting ZIP archive: {filename}")
                zip_files = self._extract_zip(Path(path).read_bytes())
                all_files.extend(zip_files)
                logger.info(f"Extracted {len(zip_files)} files from {filename}")
            elif filename.lower().endswith(".json"):
                all_files.append((filename, Path(path).read_bytes()))
            else:
                logger.warning(f"Skipping unsupported file: {filename}")

        logger.info(f"Total files loaded: {len(all_files)}")
        return all_files

    def _extract_zip(self, content: bytes) -> List[Tuple[str, bytes]]:
        """Extract JSON files from a ZIP archive."""
        files = []

        with zipfile.ZipFile(io.BytesIO(content), "r") as zf:
            for name in zf.namelist():
                if name.endswith("/") or not name.lower().endswith(".json"):
                    continue
                files.append((os.path.basename(name), zf.read(name)))

        return files

    def results_to_dataframe(self, results: List[ProcessedReceipt]):
        """
        Convert processed receipts to a pandas DataFrame, one row per receipt.

        Args:
            results: List of ProcessedReceipt objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for result in results:
            by_category = result.category_summary.get("by_category", {})
            top_category = max(by_category, key=lambda name: by_category[name]["total"]) if by_category else ""
            rows.append({
                "Receipt Ref": result.receipt_ref,
                "Store": result.store_name or "",
                "Date": result.receipt_date,
                "Time": result.receipt_time,
                "Currency": result.currency,
                "Total Amount": result.total_amount,
                "Locale": result.locale,
                "Items": len(result.items),
                "Top Category": top_category,
            })

        return pd.DataFrame(rows)

    def items_to_dataframe(self, results: List[ProcessedReceipt]):
        """
        Convert processed receipts to a pandas DataFrame, one row per item.

        Args:
            results: List of ProcessedReceipt objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for result in results:
            for item in result.items:
                rows.append({
                    "Receipt Ref": result.receipt_ref,
                    "Description": item["description"],
                    "Quantity": item["quantity"],
                    "Price Per Unit": item["price_per_unit"],
                    "Total Price": item["total_price"],
                    "Category": item["category"] or "",
                    "Source": item["category_source"],
                    "Confidence": item["confidence"] or "",
                    "Score": item["score"],
                    "Reason": item["reason"] or "",
                })

        return pd.DataFrame(rows)

    def errors_to_dataframe(self, errors: List[ProcessingError]):
        """
        Convert processing errors to a pandas DataFrame.

        Args:
            errors: List of ProcessingError objects

        Returns:
            pandas DataFrame
        """
        import pandas as pd

        rows = []
        for error in errors:
            rows.append({
                "File Name": error.file_name,
                "Error Type": error.error_type,
                "Error Message": error.error_message,
                "Timestamp": error.timestamp,
            })

        return pd.DataFrame(rows)
