#!/usr/bin/env python3
"""
Example: compose a certificate and render it to PDF.

Shows the resolution outcome for a normal record and for one whose free
text no longer fits on the first page.
"""

from dataclasses import replace
from pathlib import Path

from certlayout import CertificateRecord, render_certificate_pdf
from certlayout.utils import configure_logging


def main():
    """Render two sample certificates into output/."""
    configure_logging("INFO")

    record = CertificateRecord.from_dict({
        "studentFullName": "Ana Ruiz Gómez",
        "documentTypeLabel": "DNI",
        "documentNumber": "12345678Z",
        "primaryDate": "2025-03-12",
        "secondaryDate": "2025-03-13",
        "locationLabel": "Valencia",
        "durationLabel": "8",
        "trainingTitle": "Trabajos en altura",
        "theoryItems": ["Normativa", "Equipos de protección", "Anclajes", "Rescate"],
        "practiceItems": ["Ascenso", "Descenso", "Evacuación"],
        "trainerName": "Marta Soler",
    })

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    for label, current in (
        ("normal", record),
        ("long manual", replace(record, manual_text="Observaciones del formador. " * 80)),
    ):
        pdf_bytes, composed = render_certificate_pdf(current)
        path = output_dir / composed.file_name.replace(".pdf", f" ({label}).pdf")
        path.write_bytes(pdf_bytes)
        resolution = composed.resolution
        print(f"{label}: outcome={resolution.outcome.value} deferred={list(resolution.deferred_ids)} -> {path}")


if __name__ == "__main__":
    main()
