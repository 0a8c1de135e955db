"""
Thank-you letter template pools.

Every pool holds equivalent phrasings; the generator picks one per slot.
Placeholders: {jobTitle}, {companyName}, {timeframe}, {reference}, {impact}.

Rules for anything added here:
- No em dashes or en dashes (subject lines use a plain hyphen)
- Nothing from the phrase_lint denylist
- "Cannot wait" style eagerness only in the ENTHUSIASTIC pools
"""

from typing import Dict, Tuple

from src.writing.types import InterviewType, Tone


GREETINGS: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: ("Dear",),
    Tone.WARM: ("Hi", "Hello"),
    Tone.DIRECT: ("Hi", "Hello"),
    Tone.ENTHUSIASTIC: ("Hi", "Hello"),
    Tone.EXECUTIVE: ("Dear", "Hello"),
}

OPENING_LINES: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: (
        "I appreciate the opportunity to speak with you about the {jobTitle} position.",
        "Thank you for meeting with me to discuss the {jobTitle} role.",
        "I valued our conversation about the {jobTitle} opportunity at {companyName}.",
    ),
    Tone.WARM: (
        "I genuinely enjoyed our conversation about the {jobTitle} role.",
        "Our discussion about the {jobTitle} position gave me a clear picture of the opportunity.",
        "It was great connecting with you to learn more about the {jobTitle} role.",
    ),
    Tone.DIRECT: (
        "Thank you for the conversation about the {jobTitle} position.",
        "I appreciated learning more about the {jobTitle} role today.",
        "Thanks for taking the time to discuss the {jobTitle} opportunity.",
    ),
    Tone.ENTHUSIASTIC: (
        "What a great conversation about the {jobTitle} role.",
        "I walked away from our discussion energized about the {jobTitle} opportunity.",
        "Our talk about the {jobTitle} position reinforced my interest in joining {companyName}.",
    ),
    Tone.EXECUTIVE: (
        "Thank you for the thoughtful discussion regarding the {jobTitle} position.",
        "I appreciated the candid conversation about the {jobTitle} role and its strategic importance.",
        "Our meeting provided valuable insight into the {jobTitle} opportunity.",
    ),
}

REFERENCE_BRIDGES: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: (
        "Our discussion about {reference} resonated with my experience.",
        "I found our conversation regarding {reference} particularly relevant.",
        "Your insights on {reference} aligned well with my background.",
    ),
    Tone.WARM: (
        "When you mentioned {reference}, it clicked with my experience.",
        "I kept thinking about what you shared regarding {reference}.",
        "Your point about {reference} really stood out to me.",
    ),
    Tone.DIRECT: (
        "Regarding {reference}, I have direct experience in this area.",
        "What you described about {reference} matches my background.",
        "The discussion of {reference} connects to my past work.",
    ),
    Tone.ENTHUSIASTIC: (
        "I found myself nodding when you described {reference}.",
        "Your description of {reference} got me thinking about how I can contribute.",
        "The conversation about {reference} was exactly what I hoped to hear.",
    ),
    Tone.EXECUTIVE: (
        "The strategic considerations around {reference} align with my approach.",
        "Your perspective on {reference} reflects the kind of challenges I navigate well.",
        "Our discussion of {reference} highlighted clear overlap with my experience.",
    ),
}

FIT_BRIDGES: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: (
        "My background in {impact} positions me to contribute meaningfully to your team.",
        "Having {impact}, I understand the demands of this type of work.",
        "My experience with {impact} prepares me for the expectations of this role.",
    ),
    Tone.WARM: (
        "My work on {impact} gave me skills that translate directly to this role.",
        "What I learned from {impact} would help me contribute from the first week.",
        "The experience of {impact} shaped how I approach this type of work.",
    ),
    Tone.DIRECT: (
        "My track record with {impact} applies here.",
        "I have done similar work: {impact}.",
        "This connects to my experience: {impact}.",
    ),
    Tone.ENTHUSIASTIC: (
        "I cannot wait to bring my experience with {impact} to this role.",
        "My work on {impact} fuels my eagerness to take on this challenge.",
        "Having accomplished {impact}, I see real potential to make an impact here.",
    ),
    Tone.EXECUTIVE: (
        "My experience delivering {impact} demonstrates the caliber of support I provide.",
        "The results I achieved with {impact} reflect my standard of execution.",
        "My approach to {impact} exemplifies how I operate at the executive level.",
    ),
}

CLOSINGS: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: (
        "I remain interested in this opportunity and look forward to the next steps.",
        "Please let me know if any additional information would be useful.",
        "I welcome the opportunity to continue our conversation.",
    ),
    Tone.WARM: (
        "I am looking forward to what comes next in this process.",
        "Please let me know if there is anything else helpful I can share.",
        "I hope we get the chance to continue this conversation soon.",
    ),
    Tone.DIRECT: (
        "Let me know the next steps when you have a chance.",
        "Happy to provide any additional information you need.",
        "Looking forward to the next steps.",
    ),
    Tone.ENTHUSIASTIC: (
        "I am eager to see where this goes and ready to jump in.",
        "Cannot wait to hear about next steps in the process.",
        "I am ready to bring this energy to your team.",
    ),
    Tone.EXECUTIVE: (
        "I look forward to discussing how I can support your leadership.",
        "Please reach out as next steps become clear.",
        "I welcome further discussion at your convenience.",
    ),
}

SIGNOFFS: Dict[Tone, Tuple[str, ...]] = {
    Tone.FORMAL: ("Best regards,", "Sincerely,", "With appreciation,"),
    Tone.WARM: ("Warmly,", "Best,", "Thanks again,"),
    Tone.DIRECT: ("Best,", "Thanks,", "Regards,"),
    Tone.ENTHUSIASTIC: ("With enthusiasm,", "Cheers,", "Best,"),
    Tone.EXECUTIVE: ("Best regards,", "Respectfully,", "With appreciation,"),
}

SUBJECT_LINES: Dict[InterviewType, Tuple[str, ...]] = {
    InterviewType.RECRUITER: (
        "Following up - {jobTitle} conversation",
        "Thank you - {jobTitle} discussion",
        "Great speaking with you - {jobTitle}",
    ),
    InterviewType.HIRING_MANAGER: (
        "Thank you - {jobTitle} interview",
        "Following our {jobTitle} conversation",
        "Appreciated our discussion - {jobTitle}",
    ),
    InterviewType.PANEL: (
        "Thank you - {jobTitle} panel interview",
        "Great meeting the team - {jobTitle}",
        "Following up after panel - {jobTitle}",
    ),
    InterviewType.PEER: (
        "Great connecting - {jobTitle} role",
        "Thank you for the perspective - {jobTitle}",
        "Enjoyed our conversation - {jobTitle}",
    ),
    InterviewType.EXEC_FINAL: (
        "Thank you - {jobTitle} final interview",
        "Following our conversation - {jobTitle}",
        "Appreciated the discussion - {jobTitle} at {companyName}",
    ),
    InterviewType.OTHER: (
        "Following up - {jobTitle}",
        "Thank you - {jobTitle} conversation",
        "Great speaking with you - {jobTitle}",
    ),
}

REINTRO_LINES: Dict[InterviewType, Tuple[str, ...]] = {
    InterviewType.RECRUITER: (
        "We spoke {timeframe} about the {jobTitle} opening.",
        "You and I connected {timeframe} regarding the {jobTitle} role.",
    ),
    InterviewType.HIRING_MANAGER: (
        "We met {timeframe} to discuss the {jobTitle} position on your team.",
        "I interviewed with you {timeframe} for the {jobTitle} role.",
    ),
    InterviewType.PANEL: (
        "I met with you and the team {timeframe} for the {jobTitle} position.",
        "We spoke as part of the panel interview {timeframe} for {jobTitle}.",
    ),
    InterviewType.PEER: (
        "We connected {timeframe} as part of my interview process for {jobTitle}.",
        "You shared your perspective on the team {timeframe} during my {jobTitle} interview.",
    ),
    InterviewType.EXEC_FINAL: (
        "We met {timeframe} for the final interview regarding the {jobTitle} role.",
        "I had the opportunity to speak with you {timeframe} about the {jobTitle} position.",
    ),
    InterviewType.OTHER: (
        "We spoke {timeframe} about the {jobTitle} opportunity.",
        "You and I connected {timeframe} regarding {jobTitle}.",
    ),
}

KEY_POINTS_LEAD_INS: Dict[Tone, str] = {
    Tone.FORMAL: "I also wanted to highlight:",
    Tone.WARM: "I also wanted to highlight:",
    Tone.DIRECT: "To reinforce:",
    Tone.ENTHUSIASTIC: "A few things I wanted to emphasize:",
    Tone.EXECUTIVE: "I also wanted to highlight:",
}

DEFAULT_TIMEFRAME = "recently"
NAME_PLACEHOLDER = "[Your Name]"
