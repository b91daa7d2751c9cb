"""English texts."""

from ..signature import ProjectCategory
from ..state import OnboardingStep
from . import Language, StepText, Translations

_GUIDE_URL = "https://outline.akinlosotu.tech"

TRANSLATIONS_EN = Translations(
    language=Language.EN,

    welcome_greeting="👋 Hi {name}, welcome to {team}!",
    welcome_intro=(
        "I'm your onboarding assistant. I'll guide you through a few quick "
        "steps to get set up."
    ),
    welcome_closing="_You can come back to this DM anytime to see your progress._",

    steps={
        OnboardingStep.ACCOUNTS: StepText(
            title="Step 1: Accounts & Access",
            description=(
                "Make sure you can log in everywhere you need to:\n"
                "- Google Workspace (EOTO email address issued & tested)\n"
                "- Nextcloud (files & shared team folders)\n"
                "- Timebutler (time tracking / attendance)\n"
                "- Mattermost (you're here 🎉)\n"
                "- Any role-specific tools (e.g. CRM, finance tools)\n\n"
                "More details: "
            ),
            link=f"[Accounts & Access Guide]({_GUIDE_URL})",
            button="Mark Accounts Ready",
        ),
        OnboardingStep.PROFILE: StepText(
            title="Step 2: Complete Your Profile",
            description=(
                "Help colleagues recognize and reach you easily:\n"
                "- Upload a clear profile photo\n"
                "- Add your full name and pronouns (if desired)\n"
                "- Set your job title & department\n"
                "- Configure your timezone and working hours\n"
                "- Generate your email signature ✉️\n\n"
                "Quick reference: "
            ),
            link=f"[Mattermost Profile & Notifications]({_GUIDE_URL})",
            button="Mark Profile Complete",
        ),
        OnboardingStep.CHANNELS: StepText(
            title="Step 3: Communication Channels",
            description=(
                "Join the spaces where information flows:\n"
                "- `#announcements` — organization-wide updates\n"
                "- `#helpdesk` — IT support & quick questions\n"
                "- `#introductions` — say hello to everyone\n"
                "- Your team / project channels (ask your manager)\n\n"
                "Guidelines: "
            ),
            link=f"[Communication & Channels]({_GUIDE_URL})",
            button="Mark Channels Joined",
        ),
        OnboardingStep.TOOLS: StepText(
            title="Step 4: Tools & Equipment",
            description=(
                "Confirm your hardware and core tools are ready:\n"
                "- Laptop received, boots correctly, and you can log in\n"
                "- Wi-Fi access at your usual work location(s)\n"
                "- Nextcloud client installed (if required)\n"
                "- Email & calendar working on your primary device\n"
                "- Required VPN or remote access configured\n\n"
                "See: "
            ),
            link=f"[Devices & IT Setup]({_GUIDE_URL})",
            button="Mark Tools Ready",
        ),
        OnboardingStep.POLICIES: StepText(
            title="Step 5: Work Practices & Policies",
            description=(
                "Take an initial pass through how we work at EOTO:\n"
                "- Working hours, flextime, and vacation process\n"
                "- Privacy & data protection basics (GDPR awareness)\n"
                "- Communication expectations (response times, DM vs. channels)\n"
                "- How we store and share files (Nextcloud structure)\n\n"
                "Start here: "
            ),
            link=f"[EOTO Handbook]({_GUIDE_URL})",
            button="Mark Policies Reviewed",
        ),
        OnboardingStep.INTRO: StepText(
            title="Step 6: People & Check-ins",
            description=(
                "Make sure you're connected with the right people:\n"
                "- Brief introduction post in `#introductions`\n"
                "- 1:1 intro meeting with your manager (scheduled)\n"
                "- Check-in with your onboarding buddy (if assigned)\n"
                "- Add key people to your favorites in Mattermost\n\n"
                "Tips: "
            ),
            link=f"[Onboarding & Collaboration at EOTO]({_GUIDE_URL})",
            button="Mark Intros Done",
        ),
    },
    button_generate_signature="✉️ Generate Email Signature",

    dialog_title="Generate EOTO Email Signature",
    dialog_intro="Fill in your details to generate your EOTO email signature:",
    dialog_full_name="Full Name",
    dialog_full_name_help="Your full name as it should appear in the signature",
    dialog_position="Position",
    dialog_position_help="Your job title or role at EOTO",
    dialog_pronouns="Pronouns",
    dialog_pronouns_placeholder="she/her / sie/ihr",
    dialog_pronouns_help=(
        "Format: 'he/him / er/ihm' or 'she/her / sie/ihr' or 'No Pronouns / Keine Pronomen'"
    ),
    dialog_email="Email",
    dialog_email_help="Your EOTO email address",
    dialog_project="Project",
    dialog_project_help="Select the EOTO project you're working for",
    dialog_work_number="Work Number",
    dialog_work_number_placeholder="Tel.: 030 12345678",
    dialog_work_number_help="Your work phone number (optional, include 'Tel.:' prefix)",
    dialog_submit="Generate Signature",

    projects={
        ProjectCategory.EACH_ONE: "Each One",
        ProjectCategory.COMMUNITY: "CommUnity",
        ProjectCategory.CUZ: "CommUnity Zentrum (CUZ)",
        ProjectCategory.JUGEND: "Youth Programs",
        ProjectCategory.NAR: "Network-Antiracism (NAR)",
        ProjectCategory.AFROLUTION: "Afrolution",
    },

    signature_generated_title="✅ **EOTO Email Signature Successfully Generated!**",
    signature_generated_message=(
        "Hi {name}, your email signature for **{project}** is ready to use.\n\n"
        "**How to use this signature:**\n"
        "1. Download the HTML file below\n"
        "2. Open it in a web browser\n"
        "3. Select all content (Ctrl+A / Cmd+A)\n"
        "4. Copy (Ctrl+C / Cmd+C)\n"
        "5. Paste into your email client's signature settings\n\n"
    ),
    signature_instructions_title="**For Outlook:**\n",
    signature_instructions_outlook=(
        "- Open Outlook → File → Options → Mail → Signatures\n"
        "- Create a new signature, paste the copied content\n\n"
    ),
    signature_instructions_thunderbird=(
        "**For Thunderbird:**\n"
        "- Tools → Account Settings → Select your email → Attach signature from file\n"
        "- Select the downloaded HTML file\n\n"
    ),
    signature_project_footer="_Project: {project}_",

    step_marked_complete="Marked step '{step}' complete ✔️",
    dialog_opening="Opening EOTO signature generator...",

    field_required={
        "full_name": "Full name is required",
        "position": "Position is required",
        "email": "Email is required",
        "project": "Project is required",
    },
    project_invalid="Please select a valid project",

    error_general="An error occurred. Please try again.",
    error_generate_signature="Failed to generate signature. Please try again.",
    error_upload_signature="Failed to upload signature file. Please try again.",
)
