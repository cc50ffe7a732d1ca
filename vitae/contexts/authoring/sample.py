"""
Sample resume record.

The example shown by "load sample" lives in data/sample_resume.yaml so it can
be edited without touching code.
"""

from pathlib import Path

from omegaconf import OmegaConf

from vitae.contexts.authoring.resume_data_structure import Resume

SAMPLE_RESUME_PATH = Path(__file__).parent / "data" / "sample_resume.yaml"


def sample_resume(yaml_path: Path = SAMPLE_RESUME_PATH) -> Resume:
    """
    Load the fixed example resume.

    Args:
        yaml_path: YAML file in the persisted resume shape (defaults to the packaged sample)

    Returns:
        A new Resume instance on every call (callers may mutate it freely)
    """
    data = OmegaConf.to_container(OmegaConf.load(yaml_path), resolve=True)
    return Resume.from_dict(data)
