import csv
import os
from dataclasses import asdict, dataclass
from typing import List, Optional

from loguru import logger

from data import config
from data.settings import Settings
from libs.bech32 import Bech32Error, decode, encode


@dataclass
class DecodeRecord:
    string: str
    label: Optional[str] = None
    payload: Optional[str] = None
    padding: Optional[int] = None
    bits: Optional[int] = None
    error: Optional[str] = None


@dataclass
class EncodeRecord:
    source: str
    string: Optional[str] = None
    error: Optional[str] = None


def read_lines(path: str) -> List[str]:
    file_path = os.path.join(config.FILES_DIR, path)
    if not os.path.isfile(file_path):
        return []
    with open(file_path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def _parse_hex(value: str) -> Optional[bytes]:
    try:
        return bytes.fromhex(value.strip().removeprefix("0x"))
    except ValueError:
        return None


def parse_payload_line(line: str) -> tuple[str, bytes, Optional[int]]:
    """Split a ``label:hexpayload[:bit_n]`` line from the right.

    Labels may contain ':'. A trailing all-digit field preceded by a valid hex
    field is read as the bit count.
    """
    if ":" not in line:
        raise ValueError("expected label:hexpayload[:bits]")
    head, _, tail = line.rpartition(":")

    if tail.strip().isdigit() and ":" in head:
        label, _, payload_hex = head.rpartition(":")
        payload = _parse_hex(payload_hex)
        if payload is not None:
            return label.strip(), payload, int(tail)

    payload = _parse_hex(tail)
    if payload is None:
        raise ValueError(f"invalid hex payload '{tail.strip()}'")
    return head.strip(), payload, None


def decode_lines(lines: List[str]) -> List[DecodeRecord]:
    records: List[DecodeRecord] = []
    for line in lines:
        try:
            decoded = decode(line)
        except Bech32Error as e:
            logger.error(f"{line} | Decode | {e}")
            records.append(DecodeRecord(string=line, error=str(e)))
            continue
        records.append(
            DecodeRecord(
                string=line,
                label=decoded.label,
                payload=decoded.payload.hex(),
                padding=decoded.padding,
                bits=decoded.bit_length,
            )
        )
    return records


def encode_lines(lines: List[str]) -> List[EncodeRecord]:
    records: List[EncodeRecord] = []
    for line in lines:
        try:
            label, payload, bit_n = parse_payload_line(line)
            string = encode(label, payload, bit_n)
        except ValueError as e:
            logger.error(f"{line} | Encode | {e}")
            records.append(EncodeRecord(source=line, error=str(e)))
            continue
        records.append(EncodeRecord(source=line, string=string))
    return records


class Convert:
    @staticmethod
    def strings_to_csv() -> List[DecodeRecord]:
        lines = read_lines(Settings().strings_file)
        if not lines:
            logger.warning(f"Convert: {Settings().strings_file} is empty, skip....")
            return []

        records = decode_lines(lines)

        path = os.path.join(config.FILES_DIR, config.DECODED_CSV)
        fieldnames = ["string", "label", "payload", "padding", "bits", "error"]
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for record in records:
                writer.writerow(asdict(record))

        decoded = sum(1 for r in records if r.error is None)
        logger.success(f"Done! decoded: {decoded}/{len(records)} | Path: {path}")
        return records

    @staticmethod
    def payloads_to_txt() -> List[EncodeRecord]:
        lines = read_lines(Settings().payloads_file)
        if not lines:
            logger.warning(f"Convert: {Settings().payloads_file} is empty, skip....")
            return []

        records = encode_lines(lines)

        path = os.path.join(config.FILES_DIR, config.ENCODED_TXT)
        with open(path, "w", encoding="utf-8") as f:
            for record in records:
                if record.error is None:
                    f.write(record.string + "\n")
                else:
                    f.write(f"# {record.source}: {record.error}\n")

        encoded = sum(1 for r in records if r.error is None)
        logger.success(f"Done! encoded: {encoded}/{len(records)} | Path: {path}")
        return records
