"""Rule tables for task guidance: insights, resources and how-to steps.

Each generator walks a list of declarative rule records in order and
collects the items of every rule that fires. Nothing here does I/O or
touches the lookup cache; the only input is the occupation code and the
task descriptor. Every output list is deduplicated, first occurrence wins.
"""

from dataclasses import dataclass, field
from typing import Hashable, Iterable, TypeVar

from models.responses import TaskGuideResponse
from models.schemas.occupation import OccupationCategory
from models.schemas.task import Resource, TaskDescriptor
from services.mos_classifier import classify

T = TypeVar("T", bound=Hashable)

C = OccupationCategory


def _dedupe(items: Iterable[T]) -> list[T]:
    seen: set[T] = set()
    result: list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _title_has_any(title: str, keywords: tuple[str, ...]) -> bool:
    return any(k in title for k in keywords)


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------

CATEGORY_INSIGHTS: dict[OccupationCategory, tuple[str, ...]] = {
    C.CYBER: (
        "Enroll in free DoD SkillBridge IT pipelines: Amazon AWS Training, Microsoft MSSA, NPower, or Hiring Our Heroes Tech Programs",
        "Use your military experience to test out of CompTIA A+, Network+, Security+ through vouchers at your education center",
        "Request Joint Service Transcript (JST) to convert cyber leadership and certifications into college credits",
        "Look into federal GS-2210 IT Specialist roles: your clearance gives you priority hire on USAJobs.gov",
        "Apply to veteran apprenticeship programs: IBM SkillsBuild, Salesforce Military, Google IT Support Certificate",
        "Leverage clearance for defense contractor roles: Booz Allen, Leidos, CACI, Northrop Grumman veteran hiring programs",
    ),
    C.INFANTRY: (
        "Strong pipeline into law enforcement: local police academies, state trooper programs, federal agencies (FBI, DEA, ATF)",
        "Use the GI Bill for accredited Criminal Justice or Emergency Management programs at schools with veteran support",
        "Convert squad leader/platoon sergeant experience into civilian leadership roles: operations supervisor, security manager, emergency response coordinator",
        "Check Department of Homeland Security (DHS) and CBP veteran preference hiring programs for border patrol and federal protective service",
        "Apply leadership skills to corporate security roles at Fortune 500 companies with veteran initiatives",
        "Consider executive protection, private security contracting, or physical security specialist positions leveraging tactical experience",
    ),
    C.LAW_ENFORCEMENT: (
        "Many police departments waive part of the academy or offer lateral-entry pay for former military police",
        "Federal law enforcement (U.S. Marshals, Federal Protective Service, CBP) applies veteran preference and accepts MP experience toward GL-07 entry",
        "Use the GI Bill for a Criminal Justice degree to qualify for detective, supervisory, and federal agent tracks",
        "Corporate investigations, loss prevention, and physical security management value MP investigative and patrol experience",
        "Check your state POST (Peace Officer Standards and Training) board for military equivalency and reciprocity rules",
    ),
    C.MEDICAL: (
        "Use medic experience to fast-track EMT-Basic, EMT-Paramedic, or healthcare technician certification through state equivalency programs",
        "Your trauma medical experience from deployment aligns with ER tech, critical care tech, and fire/EMS hiring pipelines",
        "Use GI Bill for accelerated nursing (ADN/BSN) or Physician Assistant programs: many offer military credit for clinical hours",
        "Apply to VA healthcare facilities through their veteran preference hiring program for immediate placement",
        "Explore surgical tech, radiology tech, or respiratory therapy programs that accept military medical training",
        "Consider pharmaceutical companies and medical device manufacturers with veteran medical affairs programs",
    ),
    C.LOGISTICS: (
        "Direct path to supply chain management, warehouse operations, or logistics coordinator roles at Amazon, UPS, FedEx veteran hiring programs",
        "Your military logistics experience translates to civilian certifications: APICS CSCP, Six Sigma Green Belt (often free through TAP)",
        "Use JST to convert military logistics training into Supply Chain Management college credits",
        "Federal government hiring preference for GS-2001 Supply Management Specialist positions",
        "Manufacturing and distribution companies actively recruit veterans for operations management: Walmart, Target, Home Depot",
        "Consider freight brokerage, commercial driving (CDL), or transportation management positions",
    ),
    C.INTEL: (
        "Your clearance is gold: defense contractors (Booz Allen, SAIC, BAE Systems) actively recruit cleared intel veterans",
        "Federal three-letter agencies (CIA, DIA, NSA, FBI) have veteran hiring programs with expedited security clearance transfer",
        "Convert HUMINT, SIGINT, GEOINT experience into civilian analyst roles at fusion centers and private intelligence firms",
        "Use GI Bill for Masters in Intelligence Studies, Cybersecurity, or Data Analytics to level up credentials",
        "Apply intelligence analysis skills to corporate threat intelligence, fraud analysis, or risk management positions",
        "Consider contracting back to DoD/IC as a civilian analyst through cleared job boards like ClearanceJobs.com",
    ),
    C.AVIATION: (
        "Use your military maintenance experience to fast-track FAA Airframe and Powerplant (A&P) certification through equivalency programs",
        "Commercial airlines (Delta, United, Southwest) have dedicated veteran hiring programs for aircraft mechanics and technicians",
        "Apply to defense contractors maintaining military aircraft: Lockheed Martin, Boeing, Northrop Grumman",
        "Consider aviation management programs using GI Bill to move into airline operations or airport management",
        "Federal Aviation Administration (FAA) offers veteran preference for inspector and safety positions",
        "Private aviation companies and helicopter operators actively recruit military-trained pilots and mechanics",
    ),
    C.ENGINEERING: (
        "Convert military construction experience into civilian trade certifications: electrician, plumber, HVAC, heavy equipment operator",
        "Use apprenticeship programs through unions (IBEW, Plumbers Union, Operating Engineers) with veteran fast-track placement",
        "Federal hiring preference for civil engineering technician and facilities management roles",
        "Commercial construction companies (Turner, Bechtel, Fluor) have veteran hiring initiatives for project management",
        "Use GI Bill for Civil Engineering, Construction Management, or Architecture programs with military credit",
        "Consider facilities management, property management, or construction inspection positions leveraging technical skills",
    ),
    C.ADMIN: (
        "Human resources, payroll, and office management roles map directly to military personnel and admin work",
        "Pursue SHRM-CP or PHR certification: both are COOL-eligible and recognized by most civilian HR departments",
        "Federal GS-0201 Human Resources and GS-0303 administrative support roles apply veteran preference",
        "Use JST credits toward a Business Administration or Human Resource Management degree",
        "Paralegal and legal assistant programs accept military legal-admin experience and are GI Bill approved",
    ),
    C.FOOD_SERVICE: (
        "Culinary specialists transition well into restaurant management, institutional food service, and catering operations",
        "Earn ServSafe Manager certification (COOL-funded) to qualify for kitchen supervisor and food safety roles",
        "Use the GI Bill at an accredited culinary school or hospitality management program",
        "Hospitals, universities, and contract food companies (Sodexo, Aramark, Compass Group) run veteran hiring programs",
        "Consider food safety inspection with USDA or state health departments, which apply veteran preference",
    ),
}


@dataclass(frozen=True)
class InsightRule:
    """Fires when the task category matches or the title contains a keyword.

    ``category_extras`` adds further insights for specific occupation categories.
    """
    task_categories: frozenset[str]
    title_keywords: tuple[str, ...]
    insights: tuple[str, ...]
    category_extras: dict[OccupationCategory, tuple[str, ...]] = field(default_factory=dict)

    def matches(self, task: TaskDescriptor, title: str) -> bool:
        return task.category in self.task_categories or _title_has_any(title, self.title_keywords)

    def collect(self, category: OccupationCategory | None) -> tuple[str, ...]:
        return self.insights + self.category_extras.get(category, ())


TASK_INSIGHT_RULES: tuple[InsightRule, ...] = (
    InsightRule(
        task_categories=frozenset({"career"}),
        title_keywords=("resume", "job"),
        insights=(
            "Request your Joint Service Transcript (JST) through your branch portal: it translates military training into civilian college credits",
            "Use Military OneSource Career Coaching (free) to review your resume and practice interviews with civilian hiring managers",
            "Attend Hiring Our Heroes career fairs: they connect veterans directly with hiring managers, not recruiters",
        ),
        category_extras={
            C.CYBER: ("List your clearance level and investigation date near the top of your resume; cleared IT roles fill fast",),
            C.INTEL: ("Search ClearanceJobs.com first: cleared analyst roles often never reach general job boards",),
            C.INFANTRY: ("Frame combat leadership as team supervision, risk management, and operations planning for civilian employers",),
        },
    ),
    InsightRule(
        task_categories=frozenset({"education"}),
        title_keywords=("gi bill", "school"),
        insights=(
            "Check if your target school is a Yellow Ribbon Program participant for additional tuition coverage beyond GI Bill",
            "Apply for Pell Grants and FAFSA even with GI Bill: you can stack benefits to cover books, housing, and expenses",
            "Look into SkillBridge programs (last 180 days of service) to train with civilian employers while still receiving military pay",
        ),
        category_extras={
            C.MEDICAL: ("Ask nursing and PA programs about military medic bridge tracks before applying; several grant advanced standing",),
        },
    ),
    InsightRule(
        task_categories=frozenset({"healthcare"}),
        title_keywords=("disability", "va"),
        insights=(
            "Work with an accredited Veterans Service Officer (VSO) for FREE disability claim assistance: American Legion, VFW, DAV all provide this",
            "Document everything: get buddy statements from fellow service members who witnessed your injuries or conditions",
            "File your Intent to File (ITF) ASAP on VA.gov: this locks in your effective date even while gathering documentation",
        ),
        category_extras={
            C.INFANTRY: ("Combat deployments often qualify for PACT Act presumptive conditions; ask your VSO to screen for them",),
            C.AVIATION: ("Document flight-line noise exposure: hearing loss and tinnitus are among the most commonly granted claims",),
        },
    ),
    InsightRule(
        task_categories=frozenset({"housing"}),
        title_keywords=("housing", "home"),
        insights=(
            "VA Home Loans require NO down payment and NO PMI: this saves tens of thousands compared to conventional mortgages",
            "Get pre-qualified with veteran-friendly lenders: Veterans United, USAA, Navy Federal before house hunting",
            "Some states offer additional veteran property tax exemptions: check your target state's veteran benefits",
        ),
    ),
    InsightRule(
        task_categories=frozenset({"finance"}),
        title_keywords=("budget", "financial"),
        insights=(
            "Roll your TSP (Thrift Savings Plan) into a Roth IRA to avoid early withdrawal penalties and maintain tax-advantaged growth",
            "Use Military OneSource financial counseling (free, confidential) to create a transition budget and review your benefits",
            "Apply for unemployment compensation immediately after ETS in your target state: most veterans qualify",
        ),
    ),
)

GENERAL_INSIGHTS: tuple[str, ...] = (
    "Request your Joint Service Transcript (JST) through your service branch to convert military training into civilian college credits",
    "Look for DoD SkillBridge programs (last 180 days of service) that provide civilian job training while still receiving military pay",
    "Use VA Veteran Readiness and Employment (VR&E / Chapter 31) if you're unsure of your direction: free career counseling and training",
    "Attend Transition Assistance Program (TAP) workshops at least 90 days before ETS: mandatory but invaluable for benefits overview",
    "Connect with veteran service organizations (American Legion, VFW, DAV) for free claims assistance and community support",
    "Leverage your security clearance if applicable: cleared positions pay 10-20% more and are in high demand",
)

# Extra fallback lines keyed by task category
GENERAL_INSIGHT_EXTRAS: dict[str, tuple[str, ...]] = {
    "wellness": ("Vet Centers offer free, confidential readjustment counseling; no VA enrollment or disability rating required",),
    "admin": ("Keep digital copies of your DD-214, orders, and evaluations in one folder; most benefit applications ask for them",),
}


def get_insights(code: str, task: TaskDescriptor) -> list[str]:
    """Occupation and task specific insights, with a general fallback."""
    category = classify(code)
    title = task.title.lower()
    insights: list[str] = []

    if category is not None:
        insights.extend(CATEGORY_INSIGHTS.get(category, ()))

    for rule in TASK_INSIGHT_RULES:
        if rule.matches(task, title):
            insights.extend(rule.collect(category))

    if not insights:
        insights.extend(GENERAL_INSIGHTS)
        insights.extend(GENERAL_INSIGHT_EXTRAS.get(task.category, ()))

    return _dedupe(insights)


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

BASELINE_RESOURCE = Resource(
    name="VA.gov",
    url="https://www.va.gov",
    description="Official VA website for healthcare, disability claims, and benefits",
)


@dataclass(frozen=True)
class ResourceRule:
    task_categories: frozenset[str]
    title_keywords: tuple[str, ...]
    resources: tuple[Resource, ...]

    def matches(self, task: TaskDescriptor, title: str) -> bool:
        return task.category in self.task_categories or _title_has_any(title, self.title_keywords)


RESOURCE_RULES: tuple[ResourceRule, ...] = (
    ResourceRule(
        task_categories=frozenset({"career"}),
        title_keywords=("job", "resume"),
        resources=(
            Resource(
                name="Hiring Our Heroes",
                url="https://www.hiringourheroes.org",
                description="Career fairs and networking events connecting veterans with employers",
            ),
            Resource(
                name="LinkedIn for Veterans",
                url="https://www.linkedin.com/veterans",
                description="Free LinkedIn Premium for veterans and military job search tools",
            ),
            Resource(
                name="USAJobs.gov",
                url="https://www.usajobs.gov/help/working-in-government/unique-hiring-paths/veterans",
                description="Federal job board with veteran hiring preference",
            ),
            Resource(
                name="Military OneSource",
                url="https://www.militaryonesource.mil",
                description="Free career coaching, resume reviews, and transition assistance",
            ),
        ),
    ),
    ResourceRule(
        task_categories=frozenset({"education"}),
        title_keywords=("gi bill",),
        resources=(
            Resource(
                name="GI Bill Comparison Tool",
                url="https://www.va.gov/education/gi-bill-comparison-tool",
                description="Compare GI Bill benefits across schools and programs",
            ),
            Resource(
                name="Joint Service Transcript",
                url="https://jst.dod.mil",
                description="Request official transcript of military training for college credit",
            ),
            Resource(
                name="SkillBridge",
                url="https://skillbridge.osd.mil",
                description="DoD program for civilian job training during last 180 days of service",
            ),
        ),
    ),
    ResourceRule(
        task_categories=frozenset({"healthcare"}),
        title_keywords=("disability", "claim"),
        resources=(
            Resource(
                name="eBenefits",
                url="https://www.ebenefits.va.gov",
                description="File disability claims and check claim status online",
            ),
            Resource(
                name="VA Disability Calculator",
                url="https://www.va.gov/disability/compensation-rates/veteran-rates",
                description="View current disability compensation rates",
            ),
            Resource(
                name="Veterans Service Organizations",
                url="https://www.va.gov/vso",
                description="Find accredited VSOs for free disability claim assistance",
            ),
        ),
    ),
    ResourceRule(
        task_categories=frozenset({"housing"}),
        title_keywords=(),
        resources=(
            Resource(
                name="VA Home Loans",
                url="https://www.va.gov/housing-assistance/home-loans",
                description="Information on VA-backed home loans with no down payment",
            ),
            Resource(
                name="Veterans United",
                url="https://www.veteransunited.com",
                description="Nation's largest VA home loan lender",
            ),
        ),
    ),
    ResourceRule(
        task_categories=frozenset({"finance"}),
        title_keywords=(),
        resources=(
            Resource(
                name="TSP (Thrift Savings Plan)",
                url="https://www.tsp.gov",
                description="Manage your military retirement savings account",
            ),
            Resource(
                name="Military OneSource Financial Counseling",
                url="https://www.militaryonesource.mil/financial-legal",
                description="Free confidential financial counseling for service members",
            ),
        ),
    ),
)


def get_resources(task: TaskDescriptor) -> list[Resource]:
    """VA.gov plus every resource list whose rule matches the task."""
    title = task.title.lower()
    resources: list[Resource] = [BASELINE_RESOURCE]
    for rule in RESOURCE_RULES:
        if rule.matches(task, title):
            resources.extend(rule.resources)

    seen: set[tuple[str, str]] = set()
    unique: list[Resource] = []
    for r in resources:
        if (r.name, r.url) not in seen:
            seen.add((r.name, r.url))
            unique.append(r)
    return unique


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StepRule:
    """Fires when every keyword group has at least one hit in the task title.

    Steps may contain a ``{code}`` placeholder for the occupation code.
    """
    name: str
    triggers: tuple[tuple[str, ...], ...]
    steps: tuple[str, ...]
    category_bonus: dict[OccupationCategory, tuple[str, ...]] = field(default_factory=dict)

    def matches(self, title: str) -> bool:
        return all(_title_has_any(title, group) for group in self.triggers)

    def collect(self, code: str, category: OccupationCategory | None) -> list[str]:
        steps = [s.format(code=code) for s in self.steps]
        steps.extend(self.category_bonus.get(category, ()))
        return steps


STEP_RULES: tuple[StepRule, ...] = (
    StepRule(
        name="tap",
        triggers=(("tap", "transition assistance"),),
        steps=(
            "Contact your installation's Transition Assistance Office (TAO) or ACAP center",
            "Schedule your initial counseling appointment at least 90 days before ETS",
            "Attend the mandatory 5-day TAP workshop covering employment, education, and benefits",
            "Complete the Individual Transition Plan (ITP) with your counselor",
            "Attend optional workshops: resume writing, interview skills, entrepreneurship",
            "Bring your spouse if married: they can attend most sessions",
            "Keep your TAP completion certificate for verification",
        ),
    ),
    StepRule(
        name="dd214",
        triggers=(("dd-214", "dd214"),),
        steps=(
            "Request Member 4 copy (long form): this is the version needed for benefits",
            "Verify all information is correct before signing: dates, character of service, RE code",
            "Request at least 5-10 certified copies at separation",
            "Scan and save digital copies in multiple secure locations (cloud, encrypted drive)",
            "Mail one copy to your county/state veteran affairs office for official record",
            "Keep originals in fireproof safe or safety deposit box",
            "If you need copies later, request through eVetRecs or National Archives",
        ),
    ),
    StepRule(
        name="va_healthcare",
        triggers=(("enroll",), ("healthcare",)),
        steps=(
            "Gather required documents: DD-214, Social Security card, insurance info (if any)",
            "Apply online at VA.gov/health-care/apply or call 1-877-222-VETS",
            "Complete VA Form 10-10EZ (Application for Health Benefits)",
            "Provide financial information to determine priority group (affects copays)",
            "Wait for enrollment decision letter (usually 1-2 weeks)",
            "Once enrolled, schedule your initial appointment at nearest VA facility",
            "Enroll within 5 years of discharge for no-cost care; after 5 years, enrollment is still possible but may have copays",
        ),
    ),
    StepRule(
        name="disability_claim",
        triggers=(("disability",), ("claim", "documentation", "file")),
        steps=(
            "File Intent to File (ITF) on VA.gov immediately to lock in your effective date",
            "Gather service medical records through milConnect, TRICARE, or your unit",
            "Request copies of all deployment medical documentation and sick call records",
            "Write detailed personal statements describing each condition and how it affects daily life",
            "Get buddy statements from fellow service members who witnessed your injuries/conditions",
            "Document current symptoms with photos, journals, or civilian medical records",
            "Schedule your separation physical and discuss all conditions with provider",
            "Work with an accredited VSO (Veterans Service Officer) for free claim assistance",
            "Submit claim within 1 year of separation for faster processing",
            "Track claim status on VA.gov or eBenefits portal",
        ),
        category_bonus={
            C.INFANTRY: ("Ask your VSO to screen combat deployments for PACT Act presumptive conditions",),
            C.AVIATION: ("Include audiograms and noise-exposure records from flight-line duty",),
        },
    ),
    StepRule(
        name="resume",
        triggers=(("resume", "cv"),),
        steps=(
            "Identify civilian job titles that match your {code} skills using O*NET Online",
            "Use reverse chronological format: contact info, summary, experience, education, skills",
            'Translate military jargon: "squad leader" -> "team supervisor", "platoon sergeant" -> "operations manager"',
            "Quantify achievements: number of personnel led, budgets managed, operations completed",
            "Highlight security clearance (if active) at top of resume",
            "List relevant certifications, technical skills, and training",
            "Use Military OneSource or TAP for free professional resume review",
            "Tailor resume to each job posting: use keywords from job description",
            "Keep to 1-2 pages maximum",
            "Save as PDF with clear filename: FirstName_LastName_Resume.pdf",
        ),
        category_bonus={
            C.CYBER: ("Add a certifications line with DoD 8140 baseline certs (Security+, CySA+) and their expiration dates",),
            C.MEDICAL: ("List NREMT or state EMT certification numbers and your patient-care volume",),
            C.LOGISTICS: ("Quantify inventory value, shipment volume, and accountability rates you managed",),
        },
    ),
    StepRule(
        name="linkedin",
        triggers=(("linkedin",),),
        steps=(
            "Use professional photo: solid background, military uniform or business attire",
            'Write compelling headline: "[Your Role] transitioning to [Target Industry] | [Key Skills] | Security Clearance"',
            "Craft strong summary: who you are, what you bring, what you're seeking",
            "Add all military positions with civilian-friendly descriptions",
            "Request recommendations from supervisors, peers, and direct reports",
            "Add skills and get endorsed: leadership, project management, etc.",
            "Join veteran groups and industry-specific groups in your target field",
            'Turn on "Open to Work" and select "All LinkedIn Members" for recruiter visibility',
            "Connect with 50-100 professionals in your target industry",
            "Post updates about your transition and career goals",
            "Engage with others' content: like, comment, share relevant posts",
        ),
    ),
    StepRule(
        name="job_application",
        triggers=(("apply",), ("job", "position", "hiring")),
        steps=(
            "Create target list of 20-30 companies with veteran hiring programs",
            "Research each company's veteran initiatives and culture",
            "Tailor resume and cover letter to each position",
            "Use veteran job boards: Hiring Our Heroes, RecruitMilitary, LinkedIn Veterans",
            "Apply to federal positions on USAJobs.gov using veteran preference",
            "Network with company veterans through LinkedIn before applying",
            "Follow up 7-10 days after application with polite inquiry email",
            "Track applications in spreadsheet: company, position, date applied, status",
            "Prepare for interviews: research company, practice STAR method answers",
            "Send thank-you email within 24 hours of interview",
        ),
        category_bonus={
            C.CYBER: ("Search ClearanceJobs.com for roles that require your current clearance level",),
            C.INTEL: ("Search ClearanceJobs.com for roles that require your current clearance level",),
        },
    ),
    StepRule(
        name="gi_bill",
        triggers=(("gi bill", "education benefits"),),
        steps=(
            "Verify your GI Bill eligibility and entitlement months on VA.gov",
            "Research schools using GI Bill Comparison Tool for graduation rates and outcomes",
            "Request official military transcripts (JST) to get credit for military training",
            "Apply for admission to your target school",
            "Once accepted, submit VA Form 22-1990 (Application for Education Benefits)",
            "School certifying official will verify your enrollment with VA",
            "Wait for Certificate of Eligibility (COE) from VA (2-4 weeks)",
            "Provide COE to school's financial aid office",
            "Monthly housing allowance (MHA) will be direct deposited",
            "VA pays tuition directly to school at start of each term",
            "Use remaining time wisely: benefits cover 36 months of full-time study",
        ),
    ),
    StepRule(
        name="budget",
        triggers=(("budget", "financial planning"),),
        steps=(
            "List all current military income: base pay, BAH, BAS, special pays",
            "Calculate estimated civilian income based on job research",
            "List fixed expenses: rent/mortgage, car payment, insurance, phone",
            "List variable expenses: food, gas, utilities, entertainment",
            "Account for loss of military benefits: healthcare, commissary, exchange",
            "Add civilian healthcare costs (if not VA-enrolled)",
            "Factor in potential employment gap: plan for 3-6 months without income",
            "Identify areas to cut spending during transition",
            "Set up emergency fund with 3-6 months expenses",
            "Review budget with Military OneSource financial counselor (free)",
            "Use budgeting app: YNAB, Mint, or EveryDollar",
            "Update budget monthly as circumstances change",
        ),
    ),
)

GENERIC_STEPS: tuple[str, ...] = (
    "Review task requirements and deadline carefully",
    "Gather all necessary documentation and information",
    "Schedule time on your calendar and break the task into smaller steps",
    "Use free resources: TAP, Military OneSource, VSOs",
    "Track progress and follow up until the task is fully complete",
)


def get_steps(task: TaskDescriptor, code: str) -> list[str]:
    """How-to steps for a task, from every trigger found in its title."""
    title = task.title.lower()
    category = classify(code)
    steps: list[str] = []

    for rule in STEP_RULES:
        if rule.matches(title):
            steps.extend(rule.collect(code, category))

    if not steps:
        return list(GENERIC_STEPS)
    return _dedupe(steps)


def build_guide(task: TaskDescriptor, code: str) -> TaskGuideResponse:
    return TaskGuideResponse(
        category=classify(code),
        insights=get_insights(code, task),
        resources=get_resources(task),
        steps=get_steps(task, code),
    )
