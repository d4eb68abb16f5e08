"""Built-in content shown when the database has nothing for a section."""

DEFAULT_DOCTORS = {
    "eye": {
        "id": None,
        "department": "eye",
        "name": "Dr. Sanjeev Lehri",
        "title": "Senior Ophthalmologist",
        "description": (
            "Dr. Sanjeev Lehri is an experienced eye surgeon specializing in "
            "cataract, refractive and retina care."
        ),
        "image_url": None,
    },
    "gynecology": {
        "id": None,
        "department": "gynecology",
        "name": "Dr. Nisha Bhatnagar",
        "title": "Senior Gynecologist & Fertility Specialist",
        "description": (
            "With over 15 years of experience, Dr. Nisha Bhatnagar is a renowned "
            "gynecologist specializing in women's health, fertility treatments, "
            "and reproductive medicine."
        ),
        "image_url": None,
    },
}


DEFAULT_TESTIMONIALS = [
    {
        "id": "1",
        "author": "Priya S.",
        "title": "Patient",
        "quote": (
            "Dr. Nisha listens to everyone very patiently and calmly and gives a "
            "personal touch to all. I recommend everyone to consult her."
        ),
        "initials": "P",
        "delay": 100,
    },
    {
        "id": "2",
        "author": "Muskan Saarasar",
        "title": "Patient",
        "quote": (
            "I am happy that I consulted Dr. Nisha for my infertility problem "
            "and she helped me in dealing with it."
        ),
        "initials": "M",
        "delay": 200,
    },
    {
        "id": "3",
        "author": "Nidhi P.",
        "title": "Patient",
        "quote": (
            "She made me feel very comfortable in the whole process and is "
            "always available to resolve your queries."
        ),
        "initials": "N",
        "delay": 300,
    },
]

DEFAULT_FAQS = [
    {
        "id": "1",
        "question": "When should I see a gynecologist?",
        "answer": (
            "Annual check-ups usually begin around age 21. See a gynecologist "
            "sooner for irregular periods, pelvic pain or when planning a pregnancy."
        ),
    },
    {
        "id": "2",
        "question": "How long does it usually take to get pregnant?",
        "answer": (
            "Most couples conceive within 6-12 months of trying. Book a fertility "
            "consultation after a year (or 6 months if you are over 35)."
        ),
    },
    {
        "id": "3",
        "question": "Is laparoscopic surgery painful?",
        "answer": (
            "Laparoscopic procedures are minimally invasive. Most patients feel "
            "some discomfort for 1-3 days and return to normal activity within 1-2 weeks."
        ),
    },
]


def default_doctor(params):
    department = params.get("department") or "eye"
    return dict(DEFAULT_DOCTORS.get(department, DEFAULT_DOCTORS["eye"]))


