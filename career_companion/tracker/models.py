"""
Data models for tracked job applications.

Records serialize to the camelCase JSON layout used by the persisted
``job-applications`` document, so ``to_dict``/``from_dict`` are lossless.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class ApplicationStatus(Enum):
    """Pipeline stages shown as kanban columns."""
    DISCOVERY = "Discovery Hub"
    APPLIED = "Applied"
    INTERVIEW = "Interview Center"
    OFFER = "Offer"
    REJECTED = "Rejected"


STATUS_COLUMNS: List[ApplicationStatus] = [
    ApplicationStatus.DISCOVERY,
    ApplicationStatus.APPLIED,
    ApplicationStatus.INTERVIEW,
    ApplicationStatus.OFFER,
    ApplicationStatus.REJECTED,
]


class ContentType(Enum):
    """Generated content slots on an application."""
    COVER_LETTER = "coverLetter"
    RESUME_BULLETS = "resumeBullets"
    OUTREACH_PITCH = "outreachPitch"
    INTERVIEW_PREP = "interviewPrep"


TEXT_CONTENT_TYPES = (
    ContentType.COVER_LETTER,
    ContentType.RESUME_BULLETS,
    ContentType.OUTREACH_PITCH,
)


@dataclass
class FitAnalysis:
    fit_score: int
    summary: str
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fitScore": self.fit_score,
            "summary": self.summary,
            "pros": list(self.pros),
            "cons": list(self.cons),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FitAnalysis":
        return cls(
            fit_score=data["fitScore"],
            summary=data["summary"],
            pros=list(data.get("pros", [])),
            cons=list(data.get("cons", [])),
        )


@dataclass
class InterviewQuestion:
    type: str
    question: str
    tip: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "question": self.question, "tip": self.tip}


@dataclass
class InterviewPrep:
    questions: List[InterviewQuestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"questions": [q.to_dict() for q in self.questions]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InterviewPrep":
        return cls(questions=[
            InterviewQuestion(type=q["type"], question=q["question"], tip=q["tip"])
            for q in data.get("questions", [])
        ])


@dataclass
class GeneratedContent:
    """Sparse set of AI-authored artifacts; any field may be missing."""
    cover_letter: Optional[str] = None
    resume_bullets: Optional[str] = None
    outreach_pitch: Optional[str] = None
    interview_prep: Optional[InterviewPrep] = None

    _FIELDS = {
        ContentType.COVER_LETTER: "cover_letter",
        ContentType.RESUME_BULLETS: "resume_bullets",
        ContentType.OUTREACH_PITCH: "outreach_pitch",
        ContentType.INTERVIEW_PREP: "interview_prep",
    }

    def get(self, content_type: ContentType):
        return getattr(self, self._FIELDS[content_type])

    def with_value(self, content_type: ContentType, value) -> "GeneratedContent":
        """Return a copy with exactly one slot replaced."""
        return replace(self, **{self._FIELDS[content_type]: value})

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.cover_letter is not None:
            data["coverLetter"] = self.cover_letter
        if self.resume_bullets is not None:
            data["resumeBullets"] = self.resume_bullets
        if self.outreach_pitch is not None:
            data["outreachPitch"] = self.outreach_pitch
        if self.interview_prep is not None:
            data["interviewPrep"] = self.interview_prep.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedContent":
        prep = data.get("interviewPrep")
        return cls(
            cover_letter=data.get("coverLetter"),
            resume_bullets=data.get("resumeBullets"),
            outreach_pitch=data.get("outreachPitch"),
            interview_prep=InterviewPrep.from_dict(prep) if prep is not None else None,
        )


@dataclass
class Job:
    id: str
    title: str
    company: str
    location: str
    description: str
    url: str
    logo: str


@dataclass
class Application(Job):
    status: ApplicationStatus = ApplicationStatus.DISCOVERY
    fit_analysis: Optional[FitAnalysis] = None
    generated_content: Optional[GeneratedContent] = None

    def content(self, content_type: ContentType):
        """Return one generated artifact, or None if it was never produced."""
        if self.generated_content is None:
            return None
        return self.generated_content.get(content_type)

    def with_content(self, content_type: ContentType, value) -> "Application":
        current = self.generated_content or GeneratedContent()
        return replace(self, generated_content=current.with_value(content_type, value))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "url": self.url,
            "logo": self.logo,
            "status": self.status.value,
        }
        if self.fit_analysis is not None:
            data["fitAnalysis"] = self.fit_analysis.to_dict()
        if self.generated_content is not None:
            data["generatedContent"] = self.generated_content.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Application":
        fit = data.get("fitAnalysis")
        content = data.get("generatedContent")
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            description=data.get("description", ""),
            url=data.get("url", ""),
            logo=data.get("logo", ""),
            status=ApplicationStatus(data.get("status", ApplicationStatus.DISCOVERY.value)),
            fit_analysis=FitAnalysis.from_dict(fit) if fit is not None else None,
            generated_content=GeneratedContent.from_dict(content) if content is not None else None,
        )


@dataclass
class DashboardFilters:
    """Transient board query; empty strings mean "no constraint"."""
    status: str = ""
    company: str = ""
    location: str = ""

    def is_empty(self) -> bool:
        return not (self.status or self.company.strip() or self.location.strip())

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status, "company": self.company, "location": self.location}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DashboardFilters":
        return cls(
            status=data.get("status", "") or "",
            company=data.get("company", "") or "",
            location=data.get("location", "") or "",
        )


def _seed_logo(seed: str) -> str:
    return f"https://picsum.photos/seed/{seed}/100"


MOCK_APPLICATIONS: List[Application] = [
    Application(
        id="1",
        title="Senior Frontend Engineer",
        company="Innovate Inc.",
        location="Remote",
        description=(
            "We are looking for a skilled Senior Frontend Engineer to join our dynamic team. "
            "You will be responsible for building and maintaining our user-facing web applications. "
            "Required skills: React, TypeScript, Tailwind CSS, 5+ years of experience."
        ),
        url="#",
        logo=_seed_logo("innovate"),
        status=ApplicationStatus.DISCOVERY,
    ),
    Application(
        id="2",
        title="Product Designer",
        company="Creative Solutions",
        location="New York, NY",
        description=(
            "Creative Solutions is seeking a talented Product Designer to create amazing user experiences. "
            "The ideal candidate should have a strong portfolio of successful projects. "
            "Key skills: Figma, UI/UX design principles, user research."
        ),
        url="#",
        logo=_seed_logo("creative"),
        status=ApplicationStatus.DISCOVERY,
    ),
    Application(
        id="3",
        title="AI/ML Engineer",
        company="DataDriven AI",
        location="San Francisco, CA",
        description=(
            "Join our cutting-edge AI team! We are looking for an engineer with a passion for machine "
            "learning and data analysis. Experience with Python, TensorFlow, and PyTorch is a must."
        ),
        url="#",
        logo=_seed_logo("data"),
        status=ApplicationStatus.APPLIED,
    ),
    Application(
        id="4",
        title="DevOps Specialist",
        company="CloudWorks",
        location="Austin, TX",
        description=(
            "We need a DevOps Specialist to manage our cloud infrastructure. Responsibilities include "
            "CI/CD pipeline management, automation, and monitoring. "
            "Experience with AWS, Docker, and Kubernetes is required."
        ),
        url="#",
        logo=_seed_logo("cloud"),
        status=ApplicationStatus.INTERVIEW,
    ),
]

MOCK_RESUME = """
John Doe
Senior Frontend Engineer

Summary:
Highly skilled and motivated Senior Frontend Engineer with over 8 years of experience in creating responsive, user-friendly web applications. Proficient in React, TypeScript, and modern JavaScript frameworks. Passionate about clean code and excellent user experience.

Experience:
- Lead Frontend Developer at Tech Solutions (2018-Present)
  - Led the development of a major e-commerce platform using React and Redux.
  - Mentored junior developers and conducted code reviews.
- Frontend Developer at WebCrafters (2015-2018)
  - Developed and maintained client websites using Angular and jQuery.

Skills:
- Languages: JavaScript, TypeScript, HTML, CSS
- Frameworks/Libraries: React, Redux, Next.js, Tailwind CSS
- Tools: Git, Webpack, Babel, Docker
"""
