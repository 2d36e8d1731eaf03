"""Pipeline hook for the save-build-info step."""

from .step import BuildInfoResult, SaveBuildInfoStep, run_build_step

__all__ = ["BuildInfoResult", "SaveBuildInfoStep", "run_build_step"]
