"""Main entry point for resumefit."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from resumefit import __version__
from resumefit.config.settings import Settings
from resumefit.rendering.models import ExportFormat
from resumefit.utils.logging import configure_logging


def _page_count(value: str) -> int:
    pages = int(value)
    if pages not in (1, 2):
        raise argparse.ArgumentTypeError("--pages must be 1 or 2")
    return pages


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, indent=2, default=_default),
        encoding="utf-8",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resumefit",
        description="resumefit: tailor a resume profile to a job description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resumefit analyze posting.txt --out job.json
  resumefit generate --profile profile.yaml --job job.json --pages 1
  resumefit generate --profile profile.yaml --jd-text posting.txt --format json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a job description (jd.txt -> job.json)",
    )
    analyze_parser.add_argument(
        "jd_file",
        type=Path,
        help="Path to a plain-text job description",
    )
    analyze_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the analysis here instead of stdout",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a tailored resume (profile + job -> resume)",
    )
    generate_parser.add_argument(
        "--profile",
        type=Path,
        required=True,
        help="Path to profile (YAML or JSON)",
    )
    job_source = generate_parser.add_mutually_exclusive_group(required=True)
    job_source.add_argument(
        "--job",
        type=Path,
        help="Path to an analyzed job (output of 'analyze')",
    )
    job_source.add_argument(
        "--jd-text",
        type=Path,
        help="Path to a plain-text job description to analyze first",
    )
    generate_parser.add_argument(
        "--pages",
        type=_page_count,
        default=None,
        help="Page budget, 1 or 2 (defaults to settings)",
    )
    generate_parser.add_argument(
        "--format",
        choices=[ExportFormat.TXT.value, ExportFormat.JSON.value],
        default=ExportFormat.TXT.value,
        help="Export format",
    )
    generate_parser.add_argument(
        "--summary",
        action="store_true",
        help="Include a generated professional summary",
    )
    generate_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (defaults to settings.output_dir)",
    )
    generate_parser.add_argument(
        "--name",
        default=None,
        help="Base file name for the export",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"resumefit v{__version__} running {parsed.mode}")

    if parsed.mode == "analyze":
        from resumefit.analysis.service import JobAnalysisService

        jd_text = parsed.jd_file.read_text(encoding="utf-8")
        job = asyncio.run(JobAnalysisService().analyze(jd_text))

        if parsed.out is not None:
            _write_json(parsed.out, job)
            print(f"Wrote: {parsed.out}")
        else:
            print(json.dumps(job.to_dict(), indent=2))
        return 0

    if parsed.mode == "generate":
        from resumefit.analysis.models import JobRequirementModel
        from resumefit.analysis.service import JobAnalysisService
        from resumefit.layout.models import IncludeSections, ResumeConfig
        from resumefit.profile.service import ProfileService
        from resumefit.rendering.renderer import ResumeExporter
        from resumefit.tailoring.service import TailoringService

        profile_service = ProfileService()
        try:
            profile = profile_service.load_profile(parsed.profile)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading profile: {e}", file=sys.stderr)
            return 1
        for warning in profile_service.validate_profile(profile):
            logger.warning(f"Profile: {warning}")

        if parsed.job is not None:
            try:
                job = JobRequirementModel.from_dict(_load_json(parsed.job))
            except (OSError, ValueError) as e:
                print(f"Error loading job: {e}", file=sys.stderr)
                return 1
        else:
            try:
                jd_text = parsed.jd_text.read_text(encoding="utf-8")
            except OSError as e:
                print(f"Error reading job description: {e}", file=sys.stderr)
                return 1
            job = asyncio.run(JobAnalysisService().analyze(jd_text))

        resume_config = ResumeConfig(
            page_count=parsed.pages or settings.default_page_count,
            include_sections=IncludeSections(summary=parsed.summary),
        )
        result = asyncio.run(TailoringService().tailor(profile, job, resume_config))
        if not result.success or result.resume is None:
            print(result.error or "Tailoring failed", file=sys.stderr)
            return 1

        exporter = ResumeExporter()
        export = exporter.export(
            result.resume,
            parsed.format,
            file_name=parsed.name,
            section_order=settings.section_order,
        )
        export = exporter.save(export, parsed.out or settings.output_dir)

        print(f"Wrote: {export.path}")
        report = result.resume.compliance_report
        if report is not None:
            print(f"ATS compliance: {report.score}/100 ({'pass' if report.passed else 'fail'})")
        if result.relevance is not None:
            print(f"Overall match: {result.relevance.overall_match}%")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
