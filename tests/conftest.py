# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "pysam",
#     "pytest",
# ]
# ///
"""
Pytest fixtures and configuration for chop_aligned_reads testing.

This module provides shared fixtures for building alignment records by hand,
writing small SAM/BAM files and reference FASTAs, and quieting the logger.
"""

import sys
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pysam
import pytest

# Add bin directory to Python path so we can import the modules under test
BIN_DIR = Path(__file__).parent.parent / "bin"
sys.path.insert(0, str(BIN_DIR))

# Now we can import the modules we're testing
from chop_aligned_reads import ChopConfig


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def reference_sequence() -> str:
    """Simple reference sequence for testing alignment."""
    return "ATCGATCGATCGATCGATCGATCGATCGATCGATCGATCGATCGATCGATCGATCGATCG"


@pytest.fixture
def reference_fasta(temp_dir: Path, reference_sequence: str) -> Path:
    """Create a simple reference FASTA file for testing."""
    ref_path = temp_dir / "reference.fasta"
    with open(ref_path, "w") as f:
        f.write(">test_reference\n")
        f.write(f"{reference_sequence}\n")
    return ref_path


def make_record(  # noqa: PLR0913
    qname: str,
    seq: str | None,
    quals: str | None,
    cigar: str | None,
    pos: int,
    flag: int = 0,
    tags: list[tuple] | None = None,
) -> pysam.AlignedSegment:
    """
    Build a header-less AlignedSegment. `quals` is a phred+33 string and
    `cigar` SAM text (e.g. '4M5D2M'); None leaves the field unset.
    """
    rec = pysam.AlignedSegment()
    rec.query_name = qname
    rec.flag = flag
    rec.reference_id = 1
    rec.reference_start = pos
    rec.mapping_quality = 60
    if cigar is not None:
        rec.cigarstring = cigar
    rec.query_sequence = seq
    if quals is not None:
        rec.query_qualities = pysam.qualitystring_to_array(quals)
    rec.next_reference_id = 1
    rec.next_reference_start = 500
    rec.template_length = 650
    if tags:
        rec.set_tags(tags)
    return rec


@pytest.fixture
def record_factory() -> Callable[..., pysam.AlignedSegment]:
    """Factory for hand-built alignment records."""
    return make_record


@pytest.fixture
def example_record() -> pysam.AlignedSegment:
    """13 bases over 4M5D2M4I3S at position 100."""
    return make_record("test", "AGTCGATGCATGC", "?!/??50(?/321", "4M5D2M4I3S", 100)


@pytest.fixture
def default_chop_config() -> ChopConfig:
    """Five-base chunks, leftover edges kept."""
    return ChopConfig(chunk_size=5, min_length=0)


@pytest.fixture
def strict_chop_config() -> ChopConfig:
    """Five-base chunks, leftover edges dropped unless full width."""
    return ChopConfig(chunk_size=5, min_length=5)


def create_sam_header(reference_sequence: str) -> dict[str, Any]:
    """Create a minimal SAM header for testing."""
    return {
        "HD": {"VN": "1.6", "SO": "coordinate"},
        "SQ": [{"SN": "test_reference", "LN": len(reference_sequence)}],
        "RG": [{"ID": "orig", "SM": "sample0"}],
        "PG": [{"ID": "test", "PN": "chop_aligned_reads_test", "VN": "0.1.0"}],
    }


@pytest.fixture
def empty_sam_file(temp_dir: Path, reference_sequence: str) -> Path:
    """Create an empty SAM file with header only."""
    sam_path = temp_dir / "empty.sam"
    header = create_sam_header(reference_sequence)

    with pysam.AlignmentFile(str(sam_path), "w", header=header):
        pass  # Just create the file with header

    return sam_path


@pytest.fixture
def sample_bam_file(temp_dir: Path, reference_sequence: str) -> Path:
    """
    Create a sample BAM with three mapped reads and one unmapped read.

    Query lengths are 24, 12 and 16 (the last with 2S/3S clips), so with
    chunk_size=10 the mapped reads give 3 + 2 + 2 fragments.
    """
    bam_path = temp_dir / "sample.bam"
    header = create_sam_header(reference_sequence)

    with pysam.AlignmentFile(str(bam_path), "wb", header=header) as bam_file:
        reads_data = [
            ("read_001", "ATCGATCGATCGATCGATCGATCG", [(0, 24)], 2, 0),
            ("read_002", "ATCGATCGATCG", [(0, 5), (2, 2), (0, 4), (1, 3)], 10, 0),
            ("read_003", "GGATCGATCGATCCCC", [(4, 2), (0, 11), (4, 3)], 15, 16),
        ]

        for qname, seq, cigar, ref_start, flag in reads_data:
            read = pysam.AlignedSegment()
            read.query_name = qname
            read.query_sequence = seq
            read.query_qualities = [30] * len(seq)
            read.cigartuples = cigar
            read.reference_start = ref_start
            read.reference_id = 0  # First (and only) reference
            read.mapping_quality = 60
            read.flag = flag
            read.set_tag("RG", "orig", value_type="Z")
            read.set_tag("NM", 1, value_type="i")
            bam_file.write(read)

        unmapped = pysam.AlignedSegment()
        unmapped.query_name = "read_unmapped"
        unmapped.query_sequence = "ATCGATCG"
        unmapped.query_qualities = [30] * 8
        unmapped.flag = 4
        unmapped.reference_id = -1
        unmapped.reference_start = -1
        bam_file.write(unmapped)

    return bam_path


@pytest.fixture(autouse=True)
def configure_logging_for_tests() -> None:
    """Configure logging for tests to reduce noise."""
    # Remove existing handlers and set to WARNING level for tests
    from loguru import logger

    logger.remove()
    logger.add(sys.stderr, level="WARNING")
