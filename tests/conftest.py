"""
PyTest configuration and fixtures.
"""

from pathlib import Path

import pytest


SAMPLE_CSV = "\n".join(
    [
        "Timestamp,Nama,Kelas,Apakah kamu suka Checklock?,Alasan",
        "2024-01-01,Andi,XI,Iya suka,\"Praktis, cepat dan mudah\"",
        "2024-01-01,Budi,XI, Tidak suka ,Ribet dan sering error",
        "",
        "2024-01-01,Citra,XI,Lumayan,",
        "2024-01-01,Dewi,XI,\"Iya, suka banget\",Praktis sekali",
        "short,row",
        "",
    ]
)


@pytest.fixture
def survey_csv(tmp_path: Path) -> Path:
    """Write a small survey export and return its path."""
    path = tmp_path / "survey_data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def header_only_csv(tmp_path: Path) -> Path:
    """Survey export without any responses."""
    path = tmp_path / "empty.csv"
    path.write_text("Timestamp,Nama,Kelas,Pilihan,Alasan\n", encoding="utf-8")
    return path
