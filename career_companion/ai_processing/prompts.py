"""Prompt builders for each Career Companion AI flow."""

from typing import Optional


def _job_and_resume(job_description: str, resume: str) -> str:
    return f"""
JOB DESCRIPTION:
---
{job_description}
---

RESUME:
---
{resume}
---
"""


def build_fit_analysis_prompt(job_description: str, resume: str) -> str:
    return f"""
Analyze the following job description against the provided resume.
Provide a "fit score" from 0 to 100 representing how well the candidate's resume matches the job requirements.
Provide a concise one-sentence summary of the fit.
List 3-5 key qualifications from the resume that match the job description (pros).
List 3-5 potential gaps or areas where the resume is weaker for this specific role (cons).
{_job_and_resume(job_description, resume)}"""


def build_cover_letter_prompt(job_description: str, resume: str) -> str:
    return f"""
Based on the following resume and job description, write a professional, concise, and compelling cover letter.
The tone should be confident but not arrogant. Highlight the key skills and experiences from the resume that are most relevant to the job description.
Keep it to 3-4 paragraphs.
{_job_and_resume(job_description, resume)}"""


def build_resume_bullets_prompt(job_description: str, resume: str) -> str:
    return f"""
Analyze the provided resume and job description. Generate 3-5 tailored resume bullet points that highlight the most relevant skills and experiences for this specific job.
Each bullet point should start with an action verb and be achievement-oriented.
Format the output as a markdown list.
{_job_and_resume(job_description, resume)}"""


def build_outreach_pitch_prompt(job_description: str, resume: str) -> str:
    return f"""
Based on the resume and job description, write a short and effective "elevator pitch" (2-3 sentences).
This pitch can be used in an outreach email or a LinkedIn message to a recruiter. It should quickly summarize the candidate's value proposition for this role.
{_job_and_resume(job_description, resume)}"""


def build_improve_prompt(content: str) -> str:
    return f"""
Rewrite the following text to make it more impactful, professional and engaging.
Strengthen weak phrasing and use active voice, but keep the core meaning, facts and overall length.
Keep the same format (for example, keep markdown lists as lists).
Return only the improved text with no preamble.

TEXT:
---
{content}
---
"""


def build_interview_questions_prompt(job_description: str, resume: str) -> str:
    return f"""
Act as an experienced hiring manager for the role below.
Generate 5-7 likely interview questions for this candidate, mixing behavioral, technical and situational questions.
Focus on the requirements of the job and on the gaps or highlights of the resume.
For each question give its type, the question itself, and a short tip on how the candidate should approach the answer using their own experience.
{_job_and_resume(job_description, resume)}"""


def build_company_research_prompt(company_name: str, job_title: str) -> str:
    return f"""
Research the company "{company_name}" for a candidate preparing to apply for the "{job_title}" role.
Use Google Search for current information and produce a concise markdown briefing with these sections:
- **Overview**: what the company does, size and stage
- **Recent News**: notable developments from the last 12 months
- **Culture & Values**: how employees describe working there
- **Talking Points**: 3 ways the candidate can connect their interest to the company in an interview
Cite sources inline where you use them.
"""


def build_job_extraction_prompt(url: str) -> str:
    return f"""
Find the job posting at this URL: {url}
Use Google Search to read the posting and extract its details.
If the page offers a direct "Apply" link, use that as the url; otherwise use the original URL.
If the page is not a job posting, still answer with the JSON object but leave the title empty.

Respond with ONLY a JSON object, no commentary, with exactly these string fields:
{{"title": "...", "company": "...", "location": "...", "description": "...", "url": "..."}}
"""


def build_file_extraction_prompt() -> str:
    return (
        "Extract all of the text content from the attached document. "
        "Preserve the reading order, headings and list structure as plain text. "
        "Return only the extracted text with no commentary."
    )


CHAT_SYSTEM_INSTRUCTION = """
You are Career Companion, a friendly and practical AI assistant for job seekers.
You help with job searching, resumes, cover letters, interview preparation and career advice.
When the user asks you to find jobs, use Google Search and list each posting with its title, company, location and a direct link.
Keep answers concise and use markdown formatting.
"""


def build_chat_system_instruction(preferences: Optional[str] = None) -> str:
    if preferences and preferences.strip():
        return (
            f"{CHAT_SYSTEM_INSTRUCTION}\n"
            "The user's career preferences are below. Use them to tailor job searches and advice.\n"
            f"---\n{preferences.strip()}\n---\n"
        )
    return CHAT_SYSTEM_INSTRUCTION
