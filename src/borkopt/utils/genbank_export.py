import re
from io import StringIO

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqFeature import FeatureLocation, SeqFeature
from Bio.SeqRecord import SeqRecord

from ..models import OptimizationResult, OrganismProfile, OutputAlphabet


def locus_name(name: str) -> str:
    # LOCUS: без пробелов, не длиннее 16 символов
    locus = re.sub(r"\s+", "_", name.strip())[:16]
    return locus or "Optimized"


class GenBankExporter:
    @staticmethod
    def create_record(result: OptimizationResult, profile: OrganismProfile) -> str:
        locus = locus_name(result.name)
        molecule = "mRNA" if result.output_alphabet == OutputAlphabet.RNA else "DNA"
        record = SeqRecord(
            Seq(result.sequence),
            id=locus,
            name=locus,
            description=f"Codon optimized for {profile.name}",
            annotations={"molecule_type": molecule},
        )

        cds_feature = SeqFeature(
            FeatureLocation(0, len(result.sequence)),
            type="CDS",
            qualifiers={
                "translation": result.protein,
                "product": result.name,
                "note": f"Host: {profile.name} (taxid {profile.tax_id}); greedy preferred-codon substitution",
            },
        )
        record.features.append(cds_feature)

        output = StringIO()
        SeqIO.write(record, output, "genbank")
        return output.getvalue()
