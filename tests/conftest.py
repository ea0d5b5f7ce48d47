import pytest

from asselect.settings import AirType, Format, Overlay, Settings


@pytest.fixture
def defaults() -> Settings:
    return Settings()


@pytest.fixture
def populated() -> Settings:
    """A snapshot with every field moved away from its default."""
    return Settings(
        atz=AirType.DANGER,
        ils=AirType.CLASS_D,
        unlicensed=AirType.CLASS_G,
        microlight=AirType.CLASS_F,
        gliding=AirType.GLIDING,
        hirta_gvs=AirType.RESTRICTED,
        obstacle=AirType.CTR,
        home="Lasham",
        max_level=195,
        radio=True,
        format=Format.COMPETITION,
        overlay=Overlay.ATZ_DZ,
        loa=frozenset({"CAMBRIDGE RAZ", "DAVENTRY BOX"}),
        rat=frozenset({"RED ARROWS"}),
        wave=frozenset({"BIDEFORD", "FOREST OF BOWLAND"}),
    )
