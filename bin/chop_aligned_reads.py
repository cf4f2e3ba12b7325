#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "loguru",
#     "pydantic",
#     "pysam",
# ]
# ///

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

import pysam
from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

# ------------------------------- CONSTANTS -------------------------------- #

# CIGAR op codes
# 0:M, 1:I, 2:D, 3:N, 4:S, 5:H, 6:P, 7:=, 8:X
CIGAR_CHARS = "MIDNSHP=X"

SOFT_CLIP = 4
HARD_CLIP = 5

# Auxiliary tag holding read-group membership
READ_GROUP_TAG = "RG"

# Emit a progress debug line after processing this many records
DEBUG_EVERY: int = 100_000


# ------------------------------- DATA TYPES -------------------------------- #


class ChopInvariantError(RuntimeError):
    """
    A record's stored bases disagree with what its CIGAR says they should be.

    Raised instead of silently truncating, since a truncated slice would shift
    every downstream coordinate.
    """


class Consumes(Enum):
    """What a CIGAR operation advances: the read, the reference, both or neither."""

    BOTH = auto()
    QUERY = auto()
    REFERENCE = auto()
    NEITHER = auto()


CONSUMPTION: dict[int, Consumes] = {
    0: Consumes.BOTH,  # M
    1: Consumes.QUERY,  # I
    2: Consumes.REFERENCE,  # D
    3: Consumes.REFERENCE,  # N
    4: Consumes.QUERY,  # S
    5: Consumes.NEITHER,  # H
    6: Consumes.NEITHER,  # P
    7: Consumes.BOTH,  # =
    8: Consumes.BOTH,  # X
}

# Op codes advancing each coordinate, derived from the table above
REF_CONSUME = frozenset(
    op for op, kind in CONSUMPTION.items() if kind in {Consumes.BOTH, Consumes.REFERENCE}
)
QRY_CONSUME = frozenset(
    op for op, kind in CONSUMPTION.items() if kind in {Consumes.BOTH, Consumes.QUERY}
)


@pydantic_dataclass(frozen=True)
class ChopConfig:
    """
    Settings for one chopping run. Validated on construction, so a bad chunk
    size is rejected before any record is read.

    chunk_size:         maximum query bases per emitted fragment
    min_length:         minimum query bases needed to emit the final, partial fragment
    skip_clipped_bases: drop leading/trailing clips before chopping
    read_group:         RG value written on every fragment (None = no RG tag)
    keep_tags:          copy the source record's auxiliary tags onto fragments
    """

    chunk_size: int = Field(gt=0)
    min_length: int = Field(default=0, ge=0)
    skip_clipped_bases: bool = False
    read_group: str | None = Field(default=None)
    keep_tags: bool = False

    @field_validator("read_group")
    @classmethod
    def read_group_is_tag_safe(cls, v: str | None) -> str | None:
        if v is not None and (not v or any(c.isspace() for c in v)):
            msg = f"read_group must be a non-empty string without whitespace, got {v!r}"
            raise ValueError(msg)
        return v


# ----------------------------- LOGGING SETUP ------------------------------- #


def configure_logging(verbose: int, quiet: int) -> None:
    """
    Base at SUCCESS (0). Positive → louder (more verbose), negative → quieter.
    Map:
      +3.. = TRACE
      +2   = DEBUG
      +1   = INFO
       0   = SUCCESS
      -1   = WARNING
      -2   = ERROR
      <=-3 = CRITICAL
    """
    logger.remove()
    delta = verbose - quiet
    match delta:
        case d if d >= 3:  # noqa: PLR2004
            level_str = "TRACE"
        case 2:
            level_str = "DEBUG"
        case 1:
            level_str = "INFO"
        case 0:
            level_str = "SUCCESS"
        case -1:
            level_str = "WARNING"
        case -2:
            level_str = "ERROR"
        case d if d <= -3:  # noqa: PLR2004
            level_str = "CRITICAL"
    logger.add(sys.stderr, level=level_str)
    logger.debug(f"Logger configured at level: {level_str}")


# ---------------------------- CIGAR UTILITIES ------------------------------ #


class CigarOp(NamedTuple):
    """One CIGAR run: (operation code, run length)."""

    op: int
    length: int

    @staticmethod
    def from_tuple(t: tuple[int, int]) -> CigarOp:
        """Convert a raw (op, len) tuple to CigarOp."""
        op, ln = t
        return CigarOp(op, ln)

    @staticmethod
    def to_tuple(run: CigarOp) -> tuple[int, int]:
        """Convert a CigarOp back to a raw (op, len) tuple."""
        return (run.op, run.length)

    @property
    def consumes(self) -> Consumes:
        return CONSUMPTION[self.op]


class Cigar(list[CigarOp]):
    """A list of CigarOp with helpers for conversion and length bookkeeping."""

    @classmethod
    def from_pysam(cls, cig_raw: list[tuple[int, int]] | None) -> Cigar | None:
        """
        Convert pysam's list[(op, len)] to a Cigar. Returns None if input is None.
        """
        if cig_raw is None:
            return None
        return cls(CigarOp.from_tuple(t) for t in cig_raw)

    def to_pysam(self) -> list[tuple[int, int]]:
        """Convert this Cigar back to list[(op, len)] for pysam."""
        return [CigarOp.to_tuple(run) for run in self]

    def to_string(self) -> str:
        """SAM text form, e.g. '4M5D1M'. Empty CIGAR renders as '*'."""
        if not self:
            return "*"
        return "".join(f"{run.length}{CIGAR_CHARS[run.op]}" for run in self)

    @property
    def query_length(self) -> int:
        return sum(run.length for run in self if run.op in QRY_CONSUME)

    @property
    def reference_length(self) -> int:
        return sum(run.length for run in self if run.op in REF_CONSUME)


class CigarSplit(NamedTuple):
    """
    Result of placing one CIGAR run into a chunk with limited room.

    `left` goes into the current fragment; `right`, when present, is what did
    not fit and must start the next fragment.
    """

    left: CigarOp
    right: CigarOp | None
    query_consumed: int
    reference_consumed: int


def split_cigar_op(run: CigarOp, room: int) -> CigarSplit:
    """
    Take at most `room` query bases from `run`.

    Only query-consuming runs are ever split. Deletions and reference skips are
    kept whole however long they are, since they use none of the chunk's room.
    """
    # Positive invariant: the caller never asks to place a run into a full chunk
    assert room >= 1, f"Chunk room must be at least 1, got {room}"

    # Negative invariant: op code must be one of the nine SAM operations
    assert run.op in CONSUMPTION, (
        f"Invalid CIGAR operation code {run.op}: must be 0-8 (M,I,D,N,S,H,P,=,X)"
    )

    match run.consumes:
        case Consumes.REFERENCE:
            return CigarSplit(run, None, 0, run.length)
        case Consumes.NEITHER:
            return CigarSplit(run, None, 0, 0)
        case Consumes.BOTH | Consumes.QUERY:
            if run.length > room:
                left = CigarOp(run.op, room)
                right = CigarOp(run.op, run.length - room)
                taken = room
            else:
                left, right, taken = run, None, run.length
            ref_taken = taken if run.consumes is Consumes.BOTH else 0
            return CigarSplit(left, right, taken, ref_taken)


def _strip_clips(cig: Cigar) -> tuple[Cigar, int, int]:
    """
    Remove clip runs from both ends of `cig`.

    A hard clip is outermost when both are present (…5S3H), so at each end the
    hard clip is dropped first, then the soft clip.

    Returns
    -------
    trimmed : Cigar
        The CIGAR without edge clips.
    leading_soft : int
        Query bases at the start of the stored sequence that must be skipped.
    trailing_soft : int
        Query bases at the end of the stored sequence that must never be emitted.
    """
    out = Cigar(cig)
    trailing_soft = 0
    leading_soft = 0

    if out and out[-1].op == HARD_CLIP:
        out.pop()
    if out and out[-1].op == SOFT_CLIP:
        trailing_soft = out.pop().length

    if out and out[0].op == HARD_CLIP:
        out.pop(0)
    if out and out[0].op == SOFT_CLIP:
        leading_soft = out.pop(0).length

    return out, leading_soft, trailing_soft


# --------------------------- FRAGMENT BUILDING ----------------------------- #


def build_fragment(  # noqa: PLR0913
    record: pysam.AlignedSegment,
    cigar: Cigar,
    reference_offset: int,
    query_offset: int,
    local_query_consumed: int,
    is_last: bool,  # noqa: FBT001
    trailing_clipped_bases: int,
    config: ChopConfig,
    index: int,
) -> pysam.AlignedSegment:
    """
    Materialize one fragment of `record` as a new AlignedSegment.

    Sequence and qualities are sliced from `query_offset` for
    `local_query_consumed` bases; the last fragment is additionally kept clear
    of any trailing clipped bases that were removed from the CIGAR. The
    reference start is shifted by `reference_offset`. Flags, reference id,
    MAPQ and mate fields are copied verbatim.
    """
    seq: str | None = record.query_sequence
    qual = record.query_qualities

    frag = pysam.AlignedSegment(header=record.header)
    frag.query_name = f"{record.query_name}-{index}"
    frag.flag = record.flag
    frag.reference_id = record.reference_id
    frag.reference_start = record.reference_start + reference_offset
    frag.mapping_quality = record.mapping_quality
    frag.cigartuples = cigar.to_pysam()
    frag.next_reference_id = record.next_reference_id
    frag.next_reference_start = record.next_reference_start
    frag.template_length = record.template_length

    if seq is not None:
        bound = len(seq)
        if is_last:
            bound = min(bound, max(query_offset, bound - trailing_clipped_bases))
        slice_end = min(bound, query_offset + local_query_consumed)
        if query_offset > slice_end:
            msg = (
                f"Slice for fragment {index} of '{record.query_name}' is inverted: "
                f"start={query_offset} > end={slice_end} (seq_len={len(seq)})"
            )
            raise ChopInvariantError(msg)

        # Sequence first: pysam resets qualities whenever the sequence is set
        frag.query_sequence = seq[query_offset:slice_end]
        frag.query_qualities = None if qual is None else qual[query_offset:slice_end]

        # Positive invariant: emitted bases agree with the fragment CIGAR
        assert slice_end - query_offset == cigar.query_length, (
            f"Fragment {index} of '{record.query_name}' has "
            f"{slice_end - query_offset} bases but CIGAR {cigar.to_string()} "
            f"consumes {cigar.query_length}"
        )

    if config.keep_tags:
        frag.set_tags(record.get_tags(with_value_type=True))
    if config.read_group is not None:
        frag.set_tag(READ_GROUP_TAG, config.read_group, value_type="Z", replace=True)

    return frag


# ------------------------------ CORE LOGIC --------------------------------- #


@dataclass
class ChopState:
    """Cursor bookkeeping for one `chop` call. Never outlives it."""

    global_reference_offset: int = 0
    global_query_offset: int = 0
    local_query_consumed: int = 0
    local_reference_consumed: int = 0
    cigar: Cigar = field(default_factory=Cigar)
    fragments: list[pysam.AlignedSegment] = field(default_factory=list)

    def take(self, split: CigarSplit) -> None:
        self.cigar.append(split.left)
        self.local_query_consumed += split.query_consumed
        self.local_reference_consumed += split.reference_consumed

    def advance(self) -> None:
        """Fold the local counters into the global offsets and start a new fragment."""
        self.global_reference_offset += self.local_reference_consumed
        self.global_query_offset += self.local_query_consumed
        self.cigar = Cigar()
        self.local_query_consumed = 0
        self.local_reference_consumed = 0


class AlignmentChopper:
    """
    Split alignment records into fragments of at most `chunk_size` query bases.

    A chopper holds only its configuration; every call to `chop` starts from
    fresh state, so one instance can be reused for any number of records.
    """

    def __init__(self, config: ChopConfig) -> None:
        self.config = config

    @classmethod
    def configure(cls, config: ChopConfig) -> AlignmentChopper:
        logger.debug(f"ChopConfig: {config}")
        if config.keep_tags:
            logger.warning(
                "Keeping source tags on fragments: position-dependent tags "
                "(MD, NM, ...) are copied unchanged and will not describe the fragments.",
            )
        return cls(config)

    def _validate(self, record: pysam.AlignedSegment, cig: Cigar) -> None:
        seq = record.query_sequence
        if seq is None:
            return
        qual = record.query_qualities
        if qual is not None and len(qual) != len(seq):
            msg = (
                f"Sequence/quality length mismatch for '{record.query_name}': "
                f"seq={len(seq)}, qual={len(qual)}"
            )
            raise ChopInvariantError(msg)
        if cig.query_length != len(seq):
            msg = (
                f"CIGAR/sequence mismatch for '{record.query_name}': "
                f"CIGAR {cig.to_string()} consumes {cig.query_length} query bases "
                f"but the sequence has {len(seq)}"
            )
            raise ChopInvariantError(msg)

    def _emit(
        self,
        record: pysam.AlignedSegment,
        state: ChopState,
        trailing_clipped_bases: int,
        *,
        is_last: bool,
    ) -> None:
        frag = build_fragment(
            record,
            state.cigar,
            state.global_reference_offset,
            state.global_query_offset,
            state.local_query_consumed,
            is_last,
            trailing_clipped_bases,
            self.config,
            len(state.fragments),
        )
        state.fragments.append(frag)

    def chop(self, record: pysam.AlignedSegment) -> list[pysam.AlignedSegment]:
        """
        Chop `record` into fragments, in read order.

        Every fragment but the last holds exactly `chunk_size` query bases. The
        last holds whatever is left, and is only emitted when that is at least
        `min_length`. Raises ChopInvariantError if the record's CIGAR does not
        account for its stored sequence; no fragments are returned in that case.
        """
        chunk_size = self.config.chunk_size
        cig = Cigar.from_pysam(record.cigartuples) or Cigar()
        self._validate(record, cig)

        state = ChopState()
        trailing_clipped_bases = 0
        if self.config.skip_clipped_bases:
            cig, leading_soft, trailing_clipped_bases = _strip_clips(cig)
            state.global_query_offset += leading_soft

        for run in cig:
            pending: CigarOp | None = run
            while pending is not None:
                split = split_cigar_op(pending, chunk_size - state.local_query_consumed)
                state.take(split)

                # Negative invariant: a chunk can never overflow
                assert state.local_query_consumed <= chunk_size, (
                    f"Chunk overflow for '{record.query_name}': "
                    f"{state.local_query_consumed} > {chunk_size}"
                )

                if state.local_query_consumed == chunk_size:
                    self._emit(record, state, trailing_clipped_bases, is_last=False)
                    state.advance()
                pending = split.right

        if state.cigar and state.local_query_consumed >= self.config.min_length:
            self._emit(record, state, trailing_clipped_bases, is_last=True)

        logger.trace(
            f"Chopped '{record.query_name}' ({cig.to_string()}) into "
            f"{len(state.fragments)} fragment(s)",
        )
        return state.fragments


# ----------------------------- I/O UTILITIES ------------------------------- #


def _io_mode_from_ext(path: str, write: bool) -> str:  # noqa: FBT001
    """Determine pysam open mode from filename extension."""
    lower = path.lower()
    if lower.endswith(".sam"):
        return "w" if write else "r"
    if lower.endswith(".bam"):
        return "wb" if write else "rb"
    if lower.endswith(".cram"):
        return "wc" if write else "rc"
    msg = "Output/input must end with .sam, .bam, or .cram"
    logger.error(msg)
    raise ValueError(msg)


def open_alignment(
    path: str,
    write: bool,  # noqa: FBT001
    template_or_header: pysam.AlignmentFile | dict | None = None,
    reference: str | None = None,
) -> pysam.AlignmentFile:
    """
    Open SAM/BAM/CRAM with correct mode. For CRAM, pass a reference filename.
    - If write=True and template_or_header is an AlignmentFile, we use 'template=...'
      to preserve header (lossless).
    - Otherwise, pass a header dict.
    """
    # Positive invariant: path must be a non-empty string
    assert isinstance(path, str) and len(path) > 0, (  # noqa: PT018
        f"Path must be non-empty string, got: {path!r}"
    )

    mode = _io_mode_from_ext(path, write)

    kwargs = {}
    if path.lower().endswith(".cram") and reference is None:
        logger.warning(
            f"Opening CRAM without explicit reference: {path}. "
            "Decoding may fail unless the reference is resolvable.",
        )
    if path.lower().endswith(".cram") and reference is not None:
        kwargs["reference_filename"] = reference

    action = "write" if write else "read"
    logger.debug(f"Opening for {action}: {path} (mode={mode})")
    if write:
        # Negative invariant: writing requires proper template or header
        assert template_or_header is not None, (
            f"Writing to '{path}' requires template_or_header but got None"
        )

        if isinstance(template_or_header, pysam.AlignmentFile):
            return pysam.AlignmentFile(
                path,
                mode,
                template=template_or_header,
                **kwargs,
            )
        if isinstance(template_or_header, dict):
            return pysam.AlignmentFile(path, mode, header=template_or_header, **kwargs)
        msg = f"Writing requires either a template AlignmentFile or a header dict, got {type(template_or_header)}"
        logger.error(msg)
        raise ValueError(msg)
    return pysam.AlignmentFile(path, mode, **kwargs)


def build_output_header(
    header: pysam.AlignmentHeader,
    read_group: str | None,
    sample_name: str | None = None,
) -> dict:
    """
    Header dict for the chopped output: the input header plus an @RG line for
    `read_group`, replacing any existing @RG with the same ID.
    """
    out = header.to_dict()
    if read_group is None:
        return out

    rg_line = {"ID": read_group}
    if sample_name is not None:
        rg_line["SM"] = sample_name
    kept = [rg for rg in out.get("RG", []) if rg.get("ID") != read_group]
    out["RG"] = [*kept, rg_line]
    logger.debug(f"Output header read group: {rg_line}")
    return out


def batched(
    iterable: Iterable[pysam.AlignedSegment],
    batch_size: int,
) -> Iterator[list[pysam.AlignedSegment]]:
    """
    Yield lists of reads up to batch_size. Keeps memory bounded and provides
    a simple place to insert batch-wise operations if ever needed.
    """
    batch: list[pysam.AlignedSegment] = []
    for item in iterable:
        batch.append(item)
        if len(batch) >= batch_size:
            # Hand batch to caller
            yield batch

            # Caller has finished when we resume here; drop refs eagerly
            batch.clear()
    if batch:
        yield batch
        batch.clear()


def process_stream(
    inp: Iterable[pysam.AlignedSegment],
    outp: pysam.AlignmentFile,
    chopper: AlignmentChopper,
    batch_size: int = 10000,
) -> tuple[int, int, int]:
    """
    Stream input -> output in batches, writing every fragment of every mapped record.

    Unmapped records and records without a CIGAR have nothing to chop and are
    skipped. A record whose CIGAR disagrees with its sequence aborts the run.

    Returns:
        Tuple of (records_chopped, fragments_written, records_skipped)
    """
    # Positive invariant: batch size must be positive
    assert batch_size > 0, f"Batch size must be positive, got {batch_size}"

    chopped = 0
    written = 0
    skipped = 0
    seen = 0

    for batch in batched(inp, batch_size):
        logger.debug(f"Processing batch of size {len(batch)}")
        for aln in batch:
            seen += 1
            if seen % DEBUG_EVERY == 0:
                logger.debug(
                    f"Progress: seen={seen}, chopped={chopped}, "
                    f"fragments={written}, skipped={skipped}",
                )

            if aln.is_unmapped:
                skipped += 1
                logger.debug(f"Skipping unmapped read '{aln.query_name}'.")
                continue
            if aln.cigartuples is None:
                skipped += 1
                logger.debug(f"Skipping read '{aln.query_name}': no CIGAR to chop.")
                continue

            try:
                fragments = chopper.chop(aln)
            except ChopInvariantError:
                logger.error(f"Cannot chop read '{aln.query_name}'; aborting.")
                raise

            for frag in fragments:
                outp.write(frag)
            chopped += 1
            written += len(fragments)

    # Final invariant: every record is either chopped or skipped
    assert seen == chopped + skipped, (
        f"Record count inconsistency: seen={seen}, chopped={chopped}, skipped={skipped}"
    )

    logger.info(
        f"Process totals: seen={seen}, chopped={chopped}, "
        f"fragments={written}, skipped={skipped}",
    )
    return chopped, written, skipped


# --------------------------------- CLI ------------------------------------- #


def build_parser() -> argparse.ArgumentParser:
    """
    CLI:
      -v / -vv / -vvv : increase verbosity (INFO -> DEBUG -> TRACE)
      -q / -qq / -qqq : decrease verbosity (WARNING -> ERROR -> CRITICAL)
    (Mutually exclusive.)
    """
    p = argparse.ArgumentParser(
        description=(
            "Chop aligned reads in SAM/BAM/CRAM into fragments of at most --chunk-size\n"
            "query bases. Each fragment keeps a consistent CIGAR, reference start and\n"
            "sequence/quality slice, and is named <read>-<index>."
        ),
    )

    # I/O
    p.add_argument(
        "-i",
        "--in",
        dest="in_path",
        required=True,
        help="Input SAM/BAM/CRAM",
    )
    p.add_argument(
        "-o",
        "--out",
        dest="out_path",
        required=True,
        help="Output SAM/BAM/CRAM",
    )
    p.add_argument(
        "--ref",
        dest="reference",
        default=None,
        help="Reference FASTA (required/recommended for CRAM read/write)",
    )

    # Chopping
    chop_group = p.add_argument_group("Chopping")
    chop_group.add_argument(
        "-s",
        "--chunk-size",
        type=int,
        required=True,
        help="Maximum query bases per fragment",
    )
    chop_group.add_argument(
        "--min-length",
        type=int,
        default=0,
        help="Minimum query bases for the leftover last fragment to be written (default: 0, keep all)",
    )
    chop_group.add_argument(
        "--skip-clipped",
        action="store_true",
        help="Drop soft/hard clips at both ends of each read before chopping",
    )
    chop_group.add_argument(
        "--keep-tags",
        action="store_true",
        help="Copy auxiliary tags from each read onto its fragments (dropped by default)",
    )

    # Read group
    rg_group = p.add_argument_group("Read Group")
    rg_group.add_argument(
        "-g",
        "--read-group",
        default=None,
        help="Read group ID to set on every fragment and add to the output header",
    )
    rg_group.add_argument(
        "-n",
        "--sample-name",
        default=None,
        help="Sample name (SM) for the new read group; requires --read-group",
    )

    # Streaming
    p.add_argument(
        "--batch-size",
        type=int,
        default=10000,
        help="Batch size for streaming",
    )

    # Verbosity: -v/-vv/-vvv or -q/-qq/-qqq (mutually exclusive)
    g = p.add_mutually_exclusive_group()
    g.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use up to -vvv).",
    )
    g.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease verbosity (use up to -qqq).",
    )

    return p


def main(argv: Sequence[str] | None = None) -> None:
    started = time.perf_counter()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.sample_name is not None and args.read_group is None:
        parser.error("--sample-name requires --read-group")

    configure_logging(args.verbose, args.quiet)
    logger.info("Starting chopping run.")

    try:
        config = ChopConfig(
            chunk_size=args.chunk_size,
            min_length=args.min_length,
            skip_clipped_bases=bool(args.skip_clipped),
            read_group=args.read_group,
            keep_tags=bool(args.keep_tags),
        )
    except ValidationError as e:
        for err in e.errors():
            logger.error(f"Invalid {'.'.join(map(str, err['loc']))}: {err['msg']}")
        sys.exit(1)
    chopper = AlignmentChopper.configure(config)

    input_alignment = open_alignment(
        args.in_path,
        write=False,
        reference=args.reference,
    )
    try:
        output_alignment = open_alignment(
            args.out_path,
            write=True,
            template_or_header=build_output_header(
                input_alignment.header,
                args.read_group,
                args.sample_name,
            ),
            reference=args.reference,
        )
    except (OSError, ValueError):
        input_alignment.close()
        raise

    try:
        chopped, written, skipped = process_stream(
            inp=input_alignment,
            outp=output_alignment,
            chopper=chopper,
            batch_size=max(1, args.batch_size),
        )
    finally:
        output_alignment.close()
        input_alignment.close()

    logger.success(
        f"Chopped: {chopped} | Fragments written: {written} | "
        f"Skipped (unmapped or no CIGAR): {skipped}",
    )
    logger.info(f"Chopping run complete in {time.perf_counter() - started:.1f}s.")


if __name__ == "__main__":
    main()
