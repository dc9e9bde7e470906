# Sample pathways inserted when the roadmaps table is empty.

SAMPLE_ROADMAPS = [
    {
        "stream_course": "MPC",
        "roadmap_json": {
            "higher_studies": [
                "B.Tech (Engineering)",
                "B.Sc (Physics/Chemistry/Maths)",
                "B.Arch (Architecture)",
                "Integrated M.Sc Programs",
            ],
            "government_jobs": [
                "ISRO Scientist",
                "BARC Scientist",
                "Railway Engineering Services",
                "State PSU Technical Posts",
                "UPSC Engineering Services",
            ],
            "private_sector": [
                "Software Engineer",
                "Mechanical Engineer",
                "Civil Engineer",
                "Data Scientist",
                "Product Manager",
            ],
            "entrepreneurship": [
                "Tech Startup",
                "Engineering Consultancy",
                "Manufacturing Business",
                "EdTech Platform",
            ],
            "competitive_exams": ["JEE Main", "JEE Advanced", "BITSAT", "VITEEE", "State CETs"],
        },
    },
    {
        "stream_course": "BiPC",
        "roadmap_json": {
            "higher_studies": [
                "MBBS (Medicine)",
                "BDS (Dental)",
                "BAMS (Ayurveda)",
                "B.Pharmacy",
                "B.Sc Nursing",
                "Veterinary Science",
            ],
            "government_jobs": [
                "Medical Officer",
                "Staff Nurse",
                "Lab Technician",
                "Public Health Officer",
                "Research Scientist",
            ],
            "private_sector": [
                "Hospital Doctor",
                "Pharmaceutical Industry",
                "Medical Representative",
                "Clinical Research",
                "Biotechnology",
            ],
            "entrepreneurship": [
                "Private Clinic",
                "Diagnostic Center",
                "Pharmaceutical Business",
                "Health Tech Startup",
            ],
            "competitive_exams": ["NEET UG", "NEET PG", "GPAT", "JIPMER", "AIIMS"],
        },
    },
    {
        "stream_course": "Commerce",
        "roadmap_json": {
            "higher_studies": [
                "B.Com (Commerce)",
                "BBA (Business Administration)",
                "B.Sc Economics",
                "CA (Chartered Accountant)",
                "CS (Company Secretary)",
                "CMA (Cost Management)",
            ],
            "government_jobs": [
                "Bank PO",
                "Income Tax Officer",
                "Customs Officer",
                "Audit Officer",
                "Statistical Officer",
            ],
            "private_sector": [
                "Accountant",
                "Financial Analyst",
                "Business Analyst",
                "Sales Manager",
                "HR Executive",
            ],
            "entrepreneurship": [
                "Trading Business",
                "Financial Services",
                "Consulting Firm",
                "E-commerce Business",
            ],
            "competitive_exams": ["CA Foundation", "CS Executive", "CMA Foundation", "Banking Exams"],
        },
    },
    {
        "stream_course": "Arts",
        "roadmap_json": {
            "higher_studies": [
                "B.A (Various subjects)",
                "B.Ed (Education)",
                "BFA (Fine Arts)",
                "B.Journalism",
                "BA LLB (Law)",
                "B.Social Work",
            ],
            "government_jobs": [
                "Teacher",
                "IAS/IPS Officer",
                "Translator",
                "Museum Curator",
                "Social Worker",
            ],
            "private_sector": [
                "Content Writer",
                "Journalist",
                "HR Executive",
                "Event Manager",
                "NGO Worker",
            ],
            "entrepreneurship": [
                "Content Agency",
                "Event Management",
                "Art Gallery",
                "Educational Institute",
            ],
            "competitive_exams": ["UPSC Civil Services", "State PSC", "NET/JRF", "B.Ed Entrance"],
        },
    },
    {
        "stream_course": "B.Tech",
        "roadmap_json": {
            "higher_studies": [
                "M.Tech (Specialization)",
                "MBA (Management)",
                "MS (Study Abroad)",
                "PhD (Research)",
            ],
            "government_jobs": [
                "ISRO Engineer",
                "DRDO Scientist",
                "Railways Technical",
                "PSU Engineer",
                "Government IT",
            ],
            "private_sector": [
                "Software Developer",
                "System Engineer",
                "Project Manager",
                "Technical Consultant",
                "Product Engineer",
            ],
            "entrepreneurship": [
                "Tech Startup",
                "Software Company",
                "Hardware Manufacturing",
                "Consulting Services",
            ],
            "competitive_exams": ["GATE", "CAT", "GRE", "UPSC ESE"],
        },
    },
]
