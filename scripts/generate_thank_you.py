"""
CLI Entry Point: Generate a Thank-You Letter

Usage:
    python scripts/generate_thank_you.py --company "Acme" --job-title "Executive Assistant" \
        --interviewer "Sam" --notes notes.txt --resume resume.txt
    python scripts/generate_thank_you.py --company "Acme" --job-title "EA" --tone direct \
        --length short --seed 7 --format outlook --save --docx
    python scripts/generate_thank_you.py ... --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.common.config import Config
from src.common.logger import setup_logging, set_global_debug_mode
from src.writing.format_export import (
    ExportFormat,
    format_email,
    generate_filename,
    save_as_docx,
    save_as_txt,
)
from src.writing.letter_generator import ThankYouLetterGenerator, seeded_selector
from src.writing.thank_you_workflow import ThankYouLetterWorkflow, ThankYouRequest
from src.writing.types import InterviewType, LetterLength, Tone
from version import __version__


def read_text_file(path: str) -> str:
    """Read an input text file, or return empty string when no path given."""
    if not path:
        return ""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return file_path.read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a thank-you letter from interview notes and a resume"
    )
    parser.add_argument("--company", required=True, help="Company name")
    parser.add_argument("--job-title", required=True, help="Job title interviewed for")
    parser.add_argument("--interviewer", default="", help="Interviewer name(s)")
    parser.add_argument(
        "--interview-type",
        default=InterviewType.OTHER.value,
        choices=[t.value for t in InterviewType],
    )
    parser.add_argument("--tone", default=Tone.FORMAL.value, choices=[t.value for t in Tone])
    parser.add_argument(
        "--length",
        default=LetterLength.STANDARD.value,
        choices=[length.value for length in LetterLength],
    )
    parser.add_argument("--notes", default="", help="Path to interview notes text file")
    parser.add_argument("--resume", default="", help="Path to resume text file")
    parser.add_argument("--key-points", default="", help="Path to key points file (one per line)")
    parser.add_argument("--no-subject", action="store_true", help="Omit the Subject: line")
    parser.add_argument("--reintro", action="store_true", help="Add a re-introduction line")
    parser.add_argument(
        "--format",
        default=ExportFormat.PLAIN.value,
        choices=[f.value for f in ExportFormat],
        help="Mail client formatting for the printed letter",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible phrasing")
    parser.add_argument("--save", action="store_true", help="Save the letter as a .txt file")
    parser.add_argument("--docx", action="store_true", help="Save the letter as a Word document")
    parser.add_argument(
        "--output-dir",
        default=Config.LETTERS_OUTPUT_DIR,
        help="Directory for --save output",
    )
    parser.add_argument("--json", action="store_true", help="Print the full draft as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose scoring logs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main():
    """Main CLI function."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.company.strip() or not args.job_title.strip():
        parser.error("--company and --job-title must not be empty")

    try:
        Config.validate()
    except ValueError as e:
        parser.error(str(e))

    if args.debug:
        set_global_debug_mode(True)
    setup_logging("DEBUG" if args.debug else Config.LOG_LEVEL, Config.LOG_FORMAT)

    try:
        request = ThankYouRequest(
            company_name=args.company,
            job_title=args.job_title,
            interviewer_names=args.interviewer,
            interview_type=InterviewType(args.interview_type),
            tone=Tone(args.tone),
            length=LetterLength(args.length),
            interview_notes=read_text_file(args.notes),
            resume_text=read_text_file(args.resume),
            key_points_text=read_text_file(args.key_points),
            include_subject=not args.no_subject,
            include_reintro=args.reintro,
        )
    except FileNotFoundError as e:
        parser.error(str(e))

    generator = None
    if args.seed is not None:
        generator = ThankYouLetterGenerator(selector=seeded_selector(args.seed))

    workflow = ThankYouLetterWorkflow(generator=generator)
    draft = workflow.run(request)

    if args.json:
        print(json.dumps(draft.to_dict(), indent=2))
        return

    formatted = format_email(
        draft.letter.subject,
        draft.letter.body,
        export_format=args.format,
        include_subject=request.include_subject,
    )
    print(formatted)
    print()
    print("=" * 70)

    if draft.warning_message:
        print(f"⚠️  Notes: {draft.warning_message}")

    review = draft.review
    print(f"Words: {review.word_count}")
    if review.length_check.message:
        print(f"⚠️  Length: {review.length_check.message}")
    for warning in review.phrase_warnings:
        print(f"⚠️  Phrase: \"{warning.phrase}\" - {warning.suggestion}")
    if not review.has_issues:
        print("✅ No style issues found")

    if args.save:
        path = save_as_txt(formatted, generate_filename(request.company_name), args.output_dir)
        print(f"📁 Saved to {path}")

    if args.docx:
        path = save_as_docx(
            draft.letter.subject,
            draft.letter.body,
            generate_filename(request.company_name),
            args.output_dir,
            include_subject=request.include_subject,
        )
        print(f"📁 Saved to {path}")


if __name__ == "__main__":
    main()
