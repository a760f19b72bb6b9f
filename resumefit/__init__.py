"""resumefit: job-targeted resume tailoring with page budgets and ATS checks."""

__version__ = "0.1.0"
