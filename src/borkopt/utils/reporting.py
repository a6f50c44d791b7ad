from fpdf import FPDF
import datetime

from ..models import OptimizationResult, OrganismProfile


def _latin1(text: str) -> str:
    # Встроенные шрифты PDF понимают только latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class ReportGenerator:
    @staticmethod
    def create_pdf(result: OptimizationResult, profile: OrganismProfile) -> bytes:
        pdf = FPDF()
        pdf.add_page()

        # Header
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(190, 10, "Codon Optimization Report", ln=True, align="C")
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(190, 10, f"Generated on: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M')}", ln=True, align="C")
        pdf.ln(10)

        # Summary
        pdf.set_fill_color(240, 240, 240)
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(190, 8, "Summary", ln=True, fill=True)

        rows = [
            ("Record", result.name),
            ("Host organism", f"{profile.name} (taxid {profile.tax_id})"),
            ("Input type", result.mode.value),
            ("Output alphabet", result.output_alphabet.value.upper()),
            ("Input length", str(result.source_length)),
            ("Protein length (aa)", str(len(result.protein))),
            ("Output length (nt)", str(len(result.sequence))),
        ]
        pdf.set_font("Helvetica", "", 10)
        for label, value in rows:
            pdf.cell(70, 8, label, border=1)
            pdf.cell(120, 8, _latin1(value), border=1, ln=True)
        pdf.ln(10)

        # Sequences
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(190, 8, "Amino Acid Sequence", ln=True, fill=True)
        pdf.set_font("Courier", "", 8)
        pdf.multi_cell(190, 5, result.protein)
        pdf.ln(5)

        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(190, 8, f"Optimized {result.output_alphabet.value.upper()} Sequence", ln=True, fill=True)
        pdf.set_font("Courier", "", 8)
        pdf.multi_cell(190, 5, result.sequence)

        return bytes(pdf.output())
