# career_quiz/riasec/definitions.py
# Static reference data for the six RIASEC (Holland Code) interest types.
# Loaded once at import time and never mutated afterwards.

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

# Canonical type order. Also the tie-break order when two types have equal scores.
RIASEC_ORDER: Tuple[str, ...] = ('R', 'I', 'A', 'S', 'E', 'C')

# Highest tally a single type can reach on the standard question bank
DEFAULT_MAX_SCORE = 7


class InterestType(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    name_nepali: str
    subtitle: str
    subtitle_nepali: str
    focus: str
    description: str
    traits: Tuple[str, ...]
    abilities: Tuple[str, ...]
    likes: Tuple[str, ...]
    hobbies: Tuple[str, ...]
    strengths: Tuple[str, ...]
    college_majors: Tuple[str, ...]
    related_pathways: Tuple[str, ...]
    careers: Tuple[str, ...]
    occupations_extended: Tuple[str, ...]
    icon: str
    color: str
    color_light: str


_INTEREST_TYPE_DATA: List[Dict] = [
    {
        "code": "R",
        "name": "Realistic", "name_nepali": "यथार्थवादी",
        "subtitle": "The Doers", "subtitle_nepali": "कार्यकर्ता",
        "focus": "Things & Order",
        "icon": "🔧", "color": "#dc2626", "color_light": "#fef2f2",
        "description": (
            "People who have athletic or mechanical ability, prefer to work with objects, machines, tools, "
            "plants or animals, or to be outdoors. Technically & Athletically Inclined people have mechanical "
            "ingenuity and prefer to work on their own using their hands and tools to build, repair, grow, or "
            "make things, often outdoors."
        ),
        "traits": ["Practical", "Athletic", "Straightforward/Frank", "Mechanically inclined", "Nature lover",
                   "Thrifty", "Curious about the physical world", "Stable", "Concrete", "Reserved",
                   "Self-controlled", "Independent", "Ambitious", "Systematic", "Persistent"],
        "abilities": ["Fix electrical things", "Solve electrical problems", "Pitch a tent", "Play a sport",
                      "Read a blueprint", "Plant a garden", "Operate tools and machinery"],
        "likes": ["Tinker with machines/vehicles", "Work outdoors", "Use your hands", "Be physically active",
                  "Build things", "Tend/train animals", "Work on electronic equipment"],
        "hobbies": ["Refinishing furniture", "Growing plants/flowers", "Playing sports, hunting, fishing",
                    "Woodworking", "Coaching team sports", "Building models", "Repairing cars, equipment",
                    "Target shooting", "Landscaping", "Taking exercise classes"],
        "strengths": ["Practical problem-solving", "Physical coordination", "Working with tools",
                      "Building & repairing", "Mechanical ingenuity", "Athletic ability"],
        "college_majors": ["Agriculture", "Health Assistant", "Computers", "Construction", "Mechanic/Machinist",
                           "Engineering", "Food and Hospitality"],
        "related_pathways": ["Natural Resources", "Health Services", "Industrial and Engineering Technology",
                             "Arts and Communication"],
        "careers": ["Aerospace Engineer", "Aircraft Mechanic", "Automotive Mechanic", "Baker/Chef", "Carpenter",
                    "Civil Engineer", "Construction Worker", "Dental Laboratory Technician", "Diesel Mechanic",
                    "Electrician", "Electrical Engineer", "Farmer", "Firefighter", "Forester", "HVAC Technician",
                    "Industrial Machinery Mechanic", "Jeweler", "Laboratory Technician", "Landscape Worker",
                    "Machinist", "Mechanical Engineer", "Pilot", "Plumber", "Police Officer", "Practical Nurse",
                    "Quality Control Manager", "Surveyor", "Tool and Die Maker", "Truck Driver", "Welder",
                    "Veterinary Technician"],
        "occupations_extended": ["Aerospace Engineering Technicians", "Agricultural Equipment Operators",
                                 "Agricultural Technicians", "Aircraft Mechanics and Service Technicians",
                                 "Airline Pilots, Copilots, and Flight Engineers", "Athletes and Sports Competitors",
                                 "Automotive Body Repairers", "Automotive Master Mechanics", "Aviation Inspectors",
                                 "Bakers", "Brickmasons", "Broadcast Technicians", "Bus and Truck Mechanics",
                                 "Cabinetmakers", "Camera Operators", "Cardiovascular Technologists",
                                 "Cement Masons", "Chemical Plant Operators", "Civil Drafters",
                                 "Civil Engineering Technicians", "Civil Engineers", "Commercial Pilots",
                                 "Computer Support Specialists", "Construction Laborers", "Electricians",
                                 "Firefighters", "Machinists", "Plumbers", "Surveyors", "Welders"],
    },
    {
        "code": "I",
        "name": "Investigative", "name_nepali": "अन्वेषणात्मक",
        "subtitle": "The Thinkers", "subtitle_nepali": "विचारक",
        "focus": "Ideas and Things",
        "icon": "🔬", "color": "#2563eb", "color_light": "#eff6ff",
        "description": (
            "People who like to observe, learn, investigate, analyze, evaluate or solve problems. Abstract "
            "Problem Solvers prefer to work on their own, using their minds to observe, learn, investigate, "
            "research and solve abstract problems, frequently in a scientifically related area."
        ),
        "traits": ["Inquisitive", "Analytical", "Scientific", "Observant", "Precise", "Scholarly", "Cautious",
                   "Intellectually self-confident", "Introspective", "Reserved", "Broad-minded", "Independent",
                   "Logical", "Complex", "Curious"],
        "abilities": ["Think abstractly", "Solve math problems", "Understand scientific theories",
                      "Do complex calculations", "Use a microscope or computer", "Interpret formulas"],
        "likes": ["Explore a variety of ideas", "Use computers", "Work independently", "Perform lab experiments",
                  "Read scientific or technical journals", "Analyze data", "Deal with abstractions",
                  "Do research", "Be challenged"],
        "hobbies": ["Book club", "Astronomy", "Crossword puzzles/board games",
                    "Preservation of endangered species", "Computers", "Visiting museums",
                    "Collecting rocks, stamps, coins, etc.", "Amateur Radio", "Recreational flying"],
        "strengths": ["Critical thinking", "Research skills", "Data analysis", "Scientific reasoning",
                      "Abstract problem-solving", "Mathematical ability"],
        "college_majors": ["Marine Biology", "Engineering", "Chemistry", "Zoology", "Medicine/Surgery",
                           "Consumer Economics", "Psychology"],
        "related_pathways": ["Health Services", "Business", "Public and Human Services",
                             "Industrial and Engineering Technology"],
        "careers": ["Actuary", "Agronomist", "Anesthesiologist", "Anthropologist", "Archeologist", "Biochemist",
                    "Biologist", "Chemical Engineer", "Chemist", "Chiropractor", "Civil Engineer",
                    "Computer Engineer", "Computer Programmer", "Computer Systems Analyst", "Dentist", "Ecologist",
                    "Economist", "Electrical Engineer", "Geologist", "Mathematician", "Medical Lab Technologist",
                    "Meteorologist", "Nurse Practitioner", "Pharmacist", "Physician", "Psychologist",
                    "Research Analyst", "Software Engineer", "Statistician", "Technical Writer", "Veterinarian",
                    "Web Developer"],
        "occupations_extended": ["Aerospace Engineers", "Agricultural Engineers", "Anesthesiologists",
                                 "Animal Scientists", "Anthropologists", "Archeologists", "Astronomers",
                                 "Atmospheric Scientists", "Audiologists", "Biochemists and Biophysicists",
                                 "Biologists", "Biomedical Engineers", "Chemical Engineers", "Chemical Technicians",
                                 "Chemists", "Clinical Psychologists", "Computer and Information Scientists",
                                 "Computer Hardware Engineers", "Computer Programmers",
                                 "Computer Software Engineers", "Computer Systems Analysts", "Dentists",
                                 "Economists", "Epidemiologists", "Mathematicians", "Pharmacists", "Physicists",
                                 "Statisticians", "Surgeons", "Veterinarians"],
    },
    {
        "code": "A",
        "name": "Artistic", "name_nepali": "कलात्मक",
        "subtitle": "The Creators", "subtitle_nepali": "सिर्जनाकर्ता",
        "focus": "Ideas & Feelings",
        "icon": "🎨", "color": "#7c3aed", "color_light": "#f5f3ff",
        "description": (
            "People who have artistic, innovating or intuitional abilities and like to work in unstructured "
            "situations using their imagination and creativity. Idea Creators enjoy working with little "
            "supervision, innovating, problem-solving imaginatively, enjoy artistic expression, and creating, "
            "most often in the performing, visual and literary arts."
        ),
        "traits": ["Creative", "Intuitive", "Imaginative", "Innovative", "Unconventional", "Emotional",
                   "Independent", "Expressive", "Original", "Introspective", "Impulsive", "Sensitive",
                   "Courageous", "Open", "Complicated", "Idealistic", "Nonconforming"],
        "abilities": ["Sketch, draw, paint", "Play a musical instrument", "Write stories, poetry, music",
                      "Sing, act, dance", "Design fashions or interiors"],
        "likes": ["Attend concerts, theatres, art exhibits", "Read fiction, plays, and poetry", "Work on crafts",
                  "Take photographs", "Express yourself creatively", "Deal with ambiguous ideas"],
        "hobbies": ["Photography", "Performing", "Writing stories, poems", "Desktop publishing", "Sewing",
                    "Taking dance lessons", "Visiting art museums", "Designing sets for plays", "Travel",
                    "Playing a musical instrument", "Homemade crafts", "Painting", "Speaking foreign languages"],
        "strengths": ["Creativity", "Imagination", "Artistic expression", "Original thinking", "Innovation",
                      "Visual/aesthetic sense"],
        "college_majors": ["Communications", "Cosmetology", "Fine and Performing Arts", "Photography",
                           "Radio and TV", "Interior Design", "Architecture"],
        "related_pathways": ["Public and Human Services", "Arts and Communication"],
        "careers": ["Actor/Actress", "Advertising Art Director", "Advertising Manager", "Architect",
                    "Clothing/Fashion Designer", "Copywriter", "Dancer", "Choreographer", "Drama Teacher",
                    "English Teacher", "Fashion Illustrator", "Furniture Designer", "Graphic Designer",
                    "Interior Designer", "Journalist/Reporter", "Landscape Architect", "Medical Illustrator",
                    "Museum Curator", "Music Teacher", "Photographer", "Writer/Editor"],
        "occupations_extended": ["Actors", "Architects", "Architectural Drafters", "Art Directors",
                                 "Broadcast News Analysts", "Choreographers", "Commercial and Industrial Designers",
                                 "Craft Artists", "Dancers", "Desktop Publishers", "Editors", "Fashion Designers",
                                 "Film and Video Editors", "Fine Artists (Painters, Sculptors, Illustrators)",
                                 "Floral Designers", "Graphic Designers", "Hairdressers and Cosmetologists",
                                 "Interior Designers", "Interpreters and Translators", "Landscape Architects",
                                 "Makeup Artists", "Multi-Media Artists and Animators",
                                 "Music Composers and Arrangers", "Musicians", "Photographers",
                                 "Poets and Creative Writers", "Reporters and Correspondents", "Singers",
                                 "Technical Writers"],
    },
    {
        "code": "S",
        "name": "Social", "name_nepali": "सामाजिक",
        "subtitle": "The Helpers", "subtitle_nepali": "सहायक",
        "focus": "People & Feelings",
        "icon": "🤝", "color": "#059669", "color_light": "#ecfdf5",
        "description": (
            "People who like to work with people to enlighten, inform, help, train, or cure them, or are "
            "skilled with words. People Helpers like to work with people to inform, enlighten, help, train, "
            "develop or cure them."
        ),
        "traits": ["Friendly", "Helpful", "Idealistic", "Insightful", "Outgoing", "Understanding", "Cooperative",
                   "Generous", "Responsible", "Forgiving", "Patient", "Empathic", "Kind", "Persuasive"],
        "abilities": ["Teach/train others", "Express yourself clearly", "Lead a group discussion",
                      "Mediate disputes", "Plan and supervise an activity", "Cooperate well with others"],
        "likes": ["Work in groups", "Help people with problems", "Participate in meetings", "Do volunteer work",
                  "Work with young people", "Play team sports", "Serve others"],
        "hobbies": ["Volunteering with social action groups", "Writing letters",
                    "Joining campus or community organizations", "Helping others with personal concerns",
                    "Meeting new friends", "Attending sporting events", "Caring for children",
                    "Religious activities", "Going to parties", "Playing team sports"],
        "strengths": ["Empathy", "Communication", "Teaching ability", "Conflict resolution",
                      "Interpersonal skills", "Patience"],
        "college_majors": ["Counseling", "Nursing", "Physical Therapy", "Travel", "Advertising",
                           "Public Relations", "Education"],
        "related_pathways": ["Health Services", "Public and Human Services"],
        "careers": ["Air Traffic Controller", "Athletic Trainer", "Chaplain", "City Manager", "College Professor",
                    "Community Planner", "Counseling Psychologist", "Counselor/Therapist", "Cosmetologist",
                    "Dental Hygienist", "Dietitian", "Elementary School Teacher", "High School Teacher",
                    "Historian", "Home Economist", "Hospital Administrator", "Librarian", "Medical Assistant",
                    "Minister/Priest/Rabbi", "Nurse/Midwife", "Occupational Therapist", "Paralegal",
                    "Park Naturalist", "Personnel Recruiter", "Physical Therapist", "Police Officer",
                    "Preschool Worker", "Probation Officer", "Social Worker"],
        "occupations_extended": ["Adult Literacy Teachers", "Arbitrators and Mediators", "Athletic Trainers",
                                 "Child Care Workers", "Child and Family Social Workers", "Chiropractors", "Clergy",
                                 "Coaches and Scouts", "Counseling Psychologists", "Dental Hygienists",
                                 "Education Administrators", "Educational Counselors",
                                 "Elementary School Teachers", "Emergency Medical Technicians", "Fitness Trainers",
                                 "Health Educators", "Home Health Aides", "Kindergarten Teachers",
                                 "Licensed Practical Nurses", "Marriage and Family Therapists",
                                 "Mental Health Counselors", "Occupational Therapists", "Physical Therapists",
                                 "Physician Assistants", "Preschool Teachers", "Registered Nurses",
                                 "Rehabilitation Counselors", "Special Education Teachers",
                                 "Speech-Language Pathologists", "Training Specialists"],
    },
    {
        "code": "E",
        "name": "Enterprising", "name_nepali": "उद्यमशील",
        "subtitle": "The Persuaders", "subtitle_nepali": "प्रभावकारी",
        "focus": "People & Leaders",
        "icon": "💼", "color": "#d97706", "color_light": "#fffbeb",
        "description": (
            "People who like to work with others and enjoy persuading and performing. People Influencers like "
            "to work with people actively influencing, leading or managing them toward organizational goals. "
            "Comfortable in business settings."
        ),
        "traits": ["Ambitious", "Adventurous", "Assertive", "Energetic", "Enthusiastic", "Confident",
                   "Optimistic", "Sociable", "Persuasive", "Competitive", "Risk-taking", "Dominant",
                   "Extroverted"],
        "abilities": ["Lead people", "Sell things or promote ideas", "Give talks or speeches",
                      "Organize activities", "Manage people and projects", "Make quick decisions"],
        "likes": ["Influence others", "Run for office", "Start your own business",
                  "Make decisions affecting others", "Be elected to office", "Win awards",
                  "Be in a position of power"],
        "hobbies": ["Public speaking", "Debating", "Leading organizations", "Campaigning", "Starting businesses",
                    "Networking", "Community leadership", "Organizing events", "Fundraising",
                    "Competitive activities"],
        "strengths": ["Leadership", "Persuasion", "Risk-taking", "Decision making", "Public speaking",
                      "Negotiation"],
        "college_majors": ["Fashion Merchandising", "Real Estate", "Marketing/Sales", "Law", "Political Science",
                           "International Trade", "Banking/Finance"],
        "related_pathways": ["Business", "Public and Human Services", "Arts and Communication"],
        "careers": ["Administrative Services Manager", "Advertising Manager", "Advertising Sales Agent",
                    "Agent/Business Manager", "Air Traffic Controller", "Bartender", "Chef and Head Cook",
                    "Chief Executive", "Computer and Information Systems Manager", "Construction Manager",
                    "Copy Writer", "Criminal Investigator", "Curator", "Customer Service Representative",
                    "Director", "Education Administrator", "Employment Interviewer", "Engineering Manager",
                    "Financial Manager", "Funeral Director", "General Operations Manager",
                    "Human Resources Manager", "Insurance Sales Agent", "Judge", "Lawyer", "Legislator",
                    "Marketing Manager", "Personal Financial Advisor", "Producer", "Property Manager",
                    "Public Relations Manager", "Real Estate Broker", "Sales Manager", "Travel Agent"],
        "occupations_extended": ["Administrative Law Judges", "Administrative Services Managers",
                                 "Advertising and Promotions Managers", "Advertising Sales Agents",
                                 "Agents and Business Managers of Artists", "Air Traffic Controllers", "Appraisers",
                                 "Chefs and Head Cooks", "Chief Executives", "Compensation Managers",
                                 "Computer and Information Systems Managers", "Construction Managers",
                                 "Criminal Investigators", "Customer Service Representatives",
                                 "Education Administrators", "Engineering Managers", "Financial Managers",
                                 "First-Line Supervisors/Managers", "Food Service Managers",
                                 "General and Operations Managers", "Human Resources Managers",
                                 "Insurance Sales Agents", "Judges and Magistrates", "Lawyers", "Legislators",
                                 "Marketing Managers", "Public Relations Specialists", "Sales Managers",
                                 "Training Managers", "Travel Agents"],
    },
    {
        "code": "C",
        "name": "Conventional", "name_nepali": "परम्परागत",
        "subtitle": "The Organizers", "subtitle_nepali": "संगठनकर्ता",
        "focus": "Detail & Order",
        "icon": "📊", "color": "#0891b2", "color_light": "#ecfeff",
        "description": (
            "People who are very detail oriented, organized and like to work with data. Data and Detail People "
            "prefer to work with data (words and numbers), carrying out detailed instructions or following a "
            "prescribed plan."
        ),
        "traits": ["Careful", "Conforming", "Conscientious", "Detail-oriented", "Efficient", "Orderly",
                   "Organized", "Persistent", "Practical", "Precise", "Responsible", "Structured", "Systematic",
                   "Thrifty"],
        "abilities": ["Work well within a system", "Do a lot of paperwork in a short time", "Use computers",
                      "Keep accurate records", "Write business letters", "Follow detailed instructions"],
        "likes": ["Work with numbers", "Have a clear set of rules to follow", "Type or take notes",
                  "Follow directions", "Be responsible for details", "Collect or organize things"],
        "hobbies": ["Collecting things", "Organizing files", "Keeping records", "Doing puzzles",
                    "Playing card games", "Maintaining schedules", "Budgeting finances", "Computer activities",
                    "Reading instruction manuals"],
        "strengths": ["Organization", "Attention to detail", "Data management", "Following procedures",
                      "Accuracy", "Reliability"],
        "college_majors": ["Accounting", "Court Reporting", "Insurance", "Administration", "Medical Records",
                           "Banking", "Data Processing"],
        "related_pathways": ["Health Services", "Business", "Industrial and Engineering Technology"],
        "careers": ["Accountant", "Actuary", "Archivist", "Assessor", "Auditor", "Bookkeeper", "Budget Analyst",
                    "Cashier", "Claims Examiner", "Cost Estimator", "Court Reporter", "Credit Analyst",
                    "Data Entry Keyer", "Database Administrator", "Dental Assistant", "Dispatcher",
                    "Executive Secretary", "File Clerk", "Financial Analyst", "Human Resources Assistant",
                    "Insurance Claims Clerk", "Insurance Underwriter", "Legal Secretary", "Librarian",
                    "Loan Officer", "Medical Records Technician", "Medical Secretary", "Payroll Clerk",
                    "Pharmacy Technician", "Postal Service Clerk", "Receptionist", "Secretary",
                    "Statistical Assistant", "Statistician", "Tax Examiner", "Tax Preparer", "Teller",
                    "Web Developer"],
        "occupations_extended": ["Accountants", "Actuaries", "Archivists", "Assessors",
                                 "Audio-Visual Collections Specialists", "Auditors", "Bill and Account Collectors",
                                 "Billing Clerks", "Bookkeeping Clerks", "Brokerage Clerks", "Budget Analysts",
                                 "Cargo and Freight Agents", "Cashiers", "Claims Examiners",
                                 "Compensation and Benefits Specialists", "Computer Operators",
                                 "Computer Security Specialists", "Cost Estimators", "Court Clerks",
                                 "Court Reporters", "Credit Analysts", "Data Entry Keyers",
                                 "Database Administrators", "Dental Assistants", "Dispatchers",
                                 "Executive Secretaries", "Financial Analysts", "Insurance Underwriters",
                                 "Loan Officers", "Payroll Clerks"],
    },
]

INTEREST_TYPES: Dict[str, InterestType] = {
    entry["code"]: InterestType(**entry) for entry in _INTEREST_TYPE_DATA
}


def get_interest_type(code: str) -> InterestType:
    """
    Looks up a single interest type by its letter.

    Raises:
        KeyError: if the letter is not one of R, I, A, S, E, C.
    """
    return INTEREST_TYPES[code]


def type_name(code: str) -> str:
    """Returns the type name for a letter, or the letter itself when it is unknown."""
    interest_type = INTEREST_TYPES.get(code)
    return interest_type.name if interest_type else code
