"""Unit tests for GBIF models."""

import pytest

from biows.models.model_gbif import TaxonomicStatus, TaxonRecord


@pytest.mark.parametrize(
    "token, expected",
    [
        ("ACCEPTED", TaxonomicStatus.ACCEPTED),
        ("accepted", TaxonomicStatus.ACCEPTED),
        ("DOUBTFUL", TaxonomicStatus.DOUBTFUL),
        ("SYNONYM", TaxonomicStatus.SYNONYM),
        ("HETEROTYPIC_SYNONYM", TaxonomicStatus.HETEROTYPIC_SYNONYM),
        ("HOMOTYPIC_SYNONYM", TaxonomicStatus.HOMOTYPIC_SYNONYM),
        ("PROPARTE_SYNONYM", TaxonomicStatus.PROPARTE_SYNONYM),
        ("PRO_PARTE_SYNONYM", TaxonomicStatus.PROPARTE_SYNONYM),
        ("MISAPPLIED", TaxonomicStatus.MISAPPLIED),
        ("BARE_NAME", TaxonomicStatus.UNRECOGNIZED),
        ("", TaxonomicStatus.UNRECOGNIZED),
    ],
)
def test_status_from_token(token, expected):
    assert TaxonomicStatus.from_token(token) is expected


def test_status_value_is_normalised_text():
    assert TaxonomicStatus.from_token("HOMOTYPIC_SYNONYM").value == "homotypic synonym"


def test_taxon_record_defaults():
    record = TaxonRecord()

    assert record.key == 0
    assert record.scientific_name == ""
    assert record.status is None
    assert record.valid_name == ""
    assert not record.is_accepted


def test_taxon_record_coerces_nones():
    record = TaxonRecord(key=None, family=None, authorship=None)

    assert record.key == 0
    assert record.family == ""
    assert record.authorship == ""


def test_taxon_record_is_accepted():
    assert TaxonRecord(status=TaxonomicStatus.ACCEPTED).is_accepted
    assert not TaxonRecord(status=TaxonomicStatus.SYNONYM).is_accepted
