"""
Resume business logic
- owner-scoped CRUD
- templated "optimize for this job description" transform (no external AI call)
"""
import re
from typing import List, Optional

from sqlalchemy.orm import Session

from interviewhub.db.base import utcnow
from interviewhub.errors import NotFound, Unauthorized
from interviewhub.models.resume import Resume

TITLE_PATTERN = re.compile(r"([A-Za-z]+(\s+[A-Za-z]+){0,3})\s+Developer", re.IGNORECASE)

SKILL_KEYWORDS = ["React", "JavaScript", "TypeScript", "Node.js", "CSS", "HTML", "Next.js"]

DEFAULT_TEMPLATE = "professional"

GENERATED_FEEDBACK = (
    "This resume has been optimized to highlight your relevant skills and experience "
    "based on the job description. Key changes include highlighting your React experience "
    "and emphasizing your work with modern JavaScript frameworks."
)

GENERATED_RESUME = """# Jane Doe
## Frontend Developer

### Contact
* Email: jane.doe@example.com
* LinkedIn: linkedin.com/in/janedoe
* GitHub: github.com/janedoe

### Summary
Passionate frontend developer with 3+ years of experience building responsive and user-friendly web applications. Proficient in React, TypeScript, and Next.js with a focus on creating accessible and performant user interfaces.

### Skills
* Frontend: React, Next.js, TypeScript, JavaScript, HTML, CSS
* State Management: Redux, Context API
* UI Frameworks: Tailwind CSS, Material UI
* Testing: Jest, React Testing Library
* Other: Git, CI/CD, Agile methodologies

### Experience
**Frontend Developer**, TechCorp Inc. (2021-Present)
* Led the development of a new customer dashboard using Next.js and Tailwind CSS, improving user engagement by 40%
* Implemented responsive designs for mobile and tablet views, increasing mobile usage by 25%
* Collaborated with UX designers to create accessible components following WCAG guidelines

**Junior Developer**, StartupXYZ (2020-2021)
* Developed interactive UI components using React and TypeScript
* Contributed to the company's component library, improving development efficiency

### Education
**Bachelor of Science in Computer Science**
University of Technology (2016-2020)"""


def extract_title(job_description: str) -> str:
    match = TITLE_PATTERN.search(job_description or "")
    return f"{match.group(0)} Resume" if match else "Optimized Resume"


def extract_skills(job_description: str) -> List[str]:
    lowered = (job_description or "").lower()
    return [skill for skill in SKILL_KEYWORDS if skill.lower() in lowered]


class ResumeService:
    """Resumes belong to exactly one user; every access re-checks ownership."""

    @staticmethod
    def create(
        db: Session,
        owner_id: str,
        title: str,
        content: str,
        job_description: Optional[str] = None,
        template: Optional[str] = None,
        skills: Optional[List[str]] = None,
        feedback: Optional[str] = None,
    ) -> Resume:
        now = utcnow()
        resume = Resume(
            user_id=owner_id,
            title=title,
            content=content,
            job_description=job_description,
            template=template,
            skills=skills,
            feedback=feedback,
            created_at=now,
            updated_at=now,
        )
        db.add(resume)
        db.commit()
        db.refresh(resume)
        return resume

    @staticmethod
    def list_for_owner(db: Session, owner_id: str) -> List[Resume]:
        return (
            db.query(Resume)
            .filter(Resume.user_id == owner_id)
            .order_by(Resume.created_at.desc(), Resume.id.desc())
            .all()
        )

    @staticmethod
    def get_owned(db: Session, owner_id: str, resume_id: int) -> Resume:
        """
        Raises:
            NotFound: unknown id
            Unauthorized: 403, someone else's resume
        """
        resume = db.get(Resume, resume_id)
        if resume is None:
            raise NotFound("resume_not_found", f"Resume {resume_id} does not exist")
        if resume.user_id != owner_id:
            raise Unauthorized.forbidden("Not the owner of this resume")
        return resume

    @staticmethod
    def update(db: Session, owner_id: str, resume_id: int, **changes) -> Resume:
        """Only the fields passed (not None) are changed."""
        resume = ResumeService.get_owned(db, owner_id, resume_id)
        for field in ("title", "content", "job_description", "template"):
            value = changes.get(field)
            if value is not None:
                setattr(resume, field, value)
        resume.updated_at = utcnow()
        db.commit()
        db.refresh(resume)
        return resume

    @staticmethod
    def delete(db: Session, owner_id: str, resume_id: int) -> None:
        resume = ResumeService.get_owned(db, owner_id, resume_id)
        db.delete(resume)
        db.commit()

    @staticmethod
    def generate(
        db: Session,
        owner_id: str,
        current_resume_content: str,
        job_description: str,
        template: Optional[str] = None,
    ) -> Resume:
        # current_resume_content is accepted for API compatibility; the
        # placeholder transform only looks at the job description
        return ResumeService.create(
            db,
            owner_id,
            title=extract_title(job_description),
            content=GENERATED_RESUME,
            job_description=job_description,
            template=template or DEFAULT_TEMPLATE,
            skills=extract_skills(job_description),
            feedback=GENERATED_FEEDBACK,
        )
