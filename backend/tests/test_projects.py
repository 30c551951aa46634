from services.resume_parser.projects import extract_project_role, extract_projects


LABELED_PROJECTS = """Projects
Project: Expense Tracker
Technologies: React, Node.js, MongoDB
A web app to track daily spending.
GitHub: github.com/jane/expense-tracker
Live: expense-tracker.vercel.app
Project: Weather Bot
Technologies: Python
Telegram bot for forecasts.
"""

BULLETED_PROJECTS = """Projects
• Recipe Finder: Personal site built using Next.js and Tailwind
• Chess Engine (Jan 2022 - Mar 2022)
  Minimax search with alpha-beta pruning
  Technologies: C++
"""

BLOCK_PROJECTS = """Projects
Inventory System
Tracked stock levels for a retail chain
Role: Backend Developer

Blog Platform
Multi-author blogging with markdown support
"""

DATED_PROJECTS = """Projects
Compiler Toolkit (2021 - 2022)

Ray Tracer (Jan 2020 - Present)
"""


def test_labeled_projects():
    projects = extract_projects(LABELED_PROJECTS)
    assert [p.name for p in projects] == ["Expense Tracker", "Weather Bot"]

    tracker = projects[0]
    assert tracker.technologies == "React, Node.js, MongoDB"
    assert tracker.description == "A web app to track daily spending."
    assert tracker.github_link == "https://github.com/jane/expense-tracker"
    assert tracker.live_link == "https://expense-tracker.vercel.app"

    bot = projects[1]
    assert bot.technologies == "Python"
    assert bot.description == "Telegram bot for forecasts."
    assert bot.github_link == ""
    assert bot.live_link == ""


def test_bulleted_projects():
    projects = extract_projects(BULLETED_PROJECTS)
    assert [p.name for p in projects] == ["Recipe Finder", "Chess Engine"]

    finder = projects[0]
    assert finder.technologies == "Next.js and Tailwind"
    assert finder.description == "Personal site built"

    engine = projects[1]
    assert engine.technologies == "C++"
    assert engine.description == "Minimax search with alpha-beta pruning"
    assert (engine.start_date, engine.end_date) == ("Jan 2022", "Mar 2022")


def test_block_projects():
    projects = extract_projects(BLOCK_PROJECTS)
    assert [p.name for p in projects] == ["Inventory System", "Blog Platform"]
    assert projects[0].description == "Tracked stock levels for a retail chain"
    assert projects[0].role == "Backend Developer"
    assert projects[1].description == "Multi-author blogging with markdown support"
    assert projects[1].role == ""


def test_dated_project_titles():
    projects = extract_projects(DATED_PROJECTS)
    assert [p.name for p in projects] == ["Compiler Toolkit", "Ray Tracer"]
    assert (projects[0].start_date, projects[0].end_date) == ("2021", "2022")
    assert (projects[1].start_date, projects[1].end_date) == ("Jan 2020", "Present")


def test_placeholder_when_no_projects():
    projects = extract_projects("Education\nState University\n")
    assert len(projects) == 1
    assert projects[0].name == "Project"
    assert projects[0].to_dict()["githubLink"] == ""


def test_project_role():
    assert extract_project_role("Served as the Scrum Master.") == "Scrum Master"
    assert extract_project_role("Role: Frontend Lead, 3 members") == "Frontend Lead"
    assert extract_project_role("Role: " + "x" * 70) == ""
    assert extract_project_role("") == ""
