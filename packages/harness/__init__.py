from .core import play_script, survey_openers, summarize_survey
from .io import write_csv, write_manifest

__all__ = ["play_script", "survey_openers", "summarize_survey", "write_csv", "write_manifest"]
