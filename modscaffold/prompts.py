"""Interactive collection of project parameters.

:class:`ParameterCollector` asks for every parameter with Rich prompts, shows
a review table and asks for confirmation.  Declining sends it back to the
collecting step with the previous answers as defaults.  The flow is a small
state machine::

    COLLECTING -> REVIEWING -> CONFIRMED
         ^            |
         +------------+  (not confirmed)
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from rich.prompt import Confirm, Prompt

from modscaffold.errors import FetchError
from modscaffold.fetch import ReferenceCache
from modscaffold.parameters import DEFAULTS, ProjectParameters
from modscaffold.utils import console, print_summary_table, print_warning, sanitize_id

logger = logging.getLogger(__name__)

LICENSE_CHOICES = ["MIT", "Apache-2.0", "GPL-3.0", "Other"]

# Asked in this order after identity, license and metadata.
VERSION_QUESTIONS: list[tuple[str, str]] = [
    ("minecraft_version", "Minecraft Version (https://www.minecraft.net/en-us/download)"),
    ("pack_format_version", "Pack Format Version (https://minecraft.wiki/w/Pack_format)"),
    ("minecraft_version_range", "Minecraft Version Range"),
    ("neo_form_version", "NeoForm Version (https://projects.neoforged.net/neoforged/neoform)"),
    (
        "parchment_minecraft",
        "Parchment Minecraft Version (https://parchmentmc.org/docs/getting-started.html)",
    ),
    ("parchment_version", "Parchment Version (https://parchmentmc.org/docs/getting-started.html)"),
    ("fabric_version", "Fabric Version (https://fabricmc.net/develop/)"),
    ("fabric_loader_version", "Fabric Loader Version (https://fabricmc.net/develop/)"),
    (
        "forge_version",
        "Forge Version (https://files.minecraftforge.net/net/minecraftforge/forge/)",
    ),
    ("forge_loader_version_range", "Forge Loader Version Range"),
    ("neoforge_version", "NeoForge Version (https://projects.neoforged.net/neoforged/neoforge)"),
    ("neoforge_loader_version_range", "NeoForge Loader Version Range"),
    ("java_version", "Java Version (https://adoptium.net/)"),
]


class CollectorState(str, Enum):
    COLLECTING = "collecting"
    REVIEWING = "reviewing"
    CONFIRMED = "confirmed"


class ParameterCollector:
    """Prompt for :class:`ProjectParameters` until the user confirms them.

    Args:
        cache: Source of the Gradle release list.
        defaults: Initial answers; the built-in defaults when omitted.
    """

    def __init__(
        self,
        cache: ReferenceCache,
        defaults: ProjectParameters | None = None,
    ) -> None:
        self.cache = cache
        self.defaults = defaults or ProjectParameters()
        self.state = CollectorState.COLLECTING

    async def collect(self) -> ProjectParameters:
        """Run the prompt flow and return the confirmed parameters.

        The prompts block on stdin, so the flow runs in a worker thread.
        """
        versions = await self._gradle_versions()
        return await asyncio.to_thread(self.run_prompts, versions)

    def run_prompts(self, versions: list[str]) -> ProjectParameters:
        """Drive the state machine from COLLECTING to CONFIRMED."""
        answers = self.defaults.as_dict()
        self.state = CollectorState.COLLECTING

        while self.state is not CollectorState.CONFIRMED:
            if self.state is CollectorState.COLLECTING:
                answers = self.ask_all(answers, versions)
                self.state = CollectorState.REVIEWING
            else:
                print_summary_table(answers, title="Review your project details")
                if Confirm.ask("Are these details correct?", default=True):
                    self.state = CollectorState.CONFIRMED
                else:
                    print_warning("Please re-enter the project details.")
                    self.state = CollectorState.COLLECTING

        return ProjectParameters(**answers)

    def ask_all(self, previous: dict[str, str], gradle_versions: list[str]) -> dict[str, str]:
        """Ask every question once, using *previous* as the defaults."""
        answers: dict[str, str] = {}
        name = Prompt.ask("Project Name", default=previous["project_name"])
        while not name.strip():
            print_warning("Project name is required.")
            name = Prompt.ask("Project Name", default=DEFAULTS["project_name"])
        answers["project_name"] = name
        answers["project_version"] = Prompt.ask(
            "Project Version", default=previous["project_version"]
        )
        answers["project_group"] = Prompt.ask("Project Group", default=previous["project_group"])

        # Title and id follow the name unless they were set explicitly.
        title = previous["project_title"]
        if title == previous["project_name"]:
            title = name
        answers["project_title"] = Prompt.ask("Project Title", default=title)
        project_id = previous["project_id"]
        if project_id == sanitize_id(previous["project_name"]):
            project_id = sanitize_id(name)
        answers["project_id"] = Prompt.ask("Project ID", default=project_id)

        answers["project_license"] = self.ask_license(previous["project_license"])
        answers["project_author"] = Prompt.ask(
            "Project Author", default=previous["project_author"]
        )
        answers["project_credits"] = Prompt.ask(
            "Project Credits", default=previous["project_credits"]
        )
        answers["project_description"] = Prompt.ask(
            "Project Description", default=previous["project_description"]
        )

        for key, message in VERSION_QUESTIONS:
            answers[key] = Prompt.ask(message, default=previous[key])

        answers["gradle_version"] = self.ask_gradle_version(
            previous["gradle_version"], gradle_versions
        )
        return answers

    def ask_license(self, default: str) -> str:
        """Pick one of the common licenses or type any SPDX id."""
        choice = Prompt.ask(
            "Project License",
            choices=LICENSE_CHOICES,
            default=default if default in LICENSE_CHOICES else "Other",
        )
        if choice != "Other":
            return choice
        custom_default = default if default not in LICENSE_CHOICES else ""
        return Prompt.ask("Please enter your custom license ID", default=custom_default)

    def ask_gradle_version(self, default: str, versions: list[str]) -> str:
        if not versions:
            print_warning("No Gradle versions found, using the default.")
            return default
        console.print(f"[dim]Available Gradle versions: {', '.join(versions)}[/dim]")
        return Prompt.ask(
            "Select a Gradle version",
            choices=versions,
            default=default if default in versions else versions[0],
            show_choices=False,
        )

    async def _gradle_versions(self) -> list[str]:
        try:
            return await self.cache.gradle_versions()
        except FetchError as exc:
            logger.warning("Could not list Gradle versions: %s", exc)
            return []
