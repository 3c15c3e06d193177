"""Built-in portfolio document used when the real one cannot be loaded."""

from typing import Any, Final

FALLBACK_NAME: Final = "Your Name"

FALLBACK_DATA: Final[dict[str, Any]] = {
    "personal": {
        "name": FALLBACK_NAME,
        "title": "Cloud Engineer & Cybersecurity Professional",
        "bio": (
            "Passionate about cloud engineering and cybersecurity with a focus on "
            "building secure, scalable solutions."
        ),
        "summary": (
            "Experienced professional specializing in Cloud, Cybersecurity, AI, and API "
            "development. Dedicated to creating innovative solutions that drive business success."
        ),
        "contact": {
            "email": "your.email@example.com",
            "linkedin": "https://linkedin.com/in/yourprofile",
            "github": "https://github.com/yourusername",
            "behance": "https://behance.net/yourprofile",
        },
        "headshot": "images/profile/headshot.jpg",
    },
    "experience": [
        {
            "id": "exp1",
            "company": "Tech Company",
            "title": "Senior Cloud Engineer",
            "duration": "2022 - Present",
            "achievements": [
                "Led cloud migration projects reducing costs by 30%",
                "Implemented security best practices across infrastructure",
                "Mentored junior developers on cloud technologies",
            ],
            "technologies": ["AWS", "Docker", "Kubernetes", "Python"],
        }
    ],
    "projects": [
        {
            "id": "proj1",
            "title": "Cloud Security Platform",
            "description": "A comprehensive security monitoring platform for cloud infrastructure.",
            "tools": ["AWS", "Python", "React", "Docker"],
            "outcomes": [
                "Reduced security incidents by 40%",
                "Automated threat detection and response",
            ],
            "images": ["images/projects/project1.jpg"],
            "links": [
                {"name": "GitHub", "url": "https://github.com/yourusername/project"},
                {"name": "Live Demo", "url": "https://yourproject.com"},
            ],
        }
    ],
    "skills": [
        {
            "category": "Cloud",
            "skills": [
                {"name": "AWS", "proficiency": "expert"},
                {"name": "Azure", "proficiency": "advanced"},
                {"name": "Docker", "proficiency": "expert"},
                {"name": "Kubernetes", "proficiency": "advanced"},
            ],
        },
        {
            "category": "Cybersecurity",
            "skills": [
                {"name": "Security Auditing", "proficiency": "expert"},
                {"name": "Penetration Testing", "proficiency": "advanced"},
                {"name": "Compliance", "proficiency": "advanced"},
            ],
        },
        {
            "category": "Programming",
            "skills": [
                {"name": "Python", "proficiency": "expert"},
                {"name": "JavaScript", "proficiency": "advanced"},
                {"name": "Go", "proficiency": "intermediate"},
            ],
        },
        {
            "category": "Design",
            "skills": [
                {"name": "UI/UX Design", "proficiency": "intermediate"},
                {"name": "Figma", "proficiency": "intermediate"},
            ],
        },
    ],
}
