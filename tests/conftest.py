from pathlib import Path

import pytest


SAMPLE_CSV = """UNITID,INSTNM,STABBR,SAT_AVG,ACTCMMID,NOTES
1,Alpha College,CA,1450,33,
2,Beta University,NY,NULL,NULL,NA
3,Gamma Institute,TX,1200,,ok
4,Delta State,PA,1400,32,PrivacySuppressed
"""


@pytest.fixture
def scorecard_csv(tmp_path: Path) -> Path:
	"""Four institutions; SAT_AVG has one NULL, ACTCMMID one NULL and one blank."""
	path = tmp_path / "scorecard.csv"
	path.write_text(SAMPLE_CSV)
	return path
