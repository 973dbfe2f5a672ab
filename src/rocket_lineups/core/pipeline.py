# ABOUTME: Pipeline orchestrator - grunt guide extraction followed by each roster leader and boss page
# ABOUTME: Each page's records are ordered on their own, then concatenated in roster order

import random
from collections.abc import Callable, Sequence

from rocket_lineups.config import get_config
from rocket_lineups.core.builder import PortraitResolver, build_grunt_invasion, build_leader_invasion
from rocket_lineups.core.models import DEFAULT_ROSTER, InvasionRecord, RosterEntry
from rocket_lineups.core.ordering import order_invasions
from rocket_lineups.extraction.base import PageMarkupProvider
from rocket_lineups.extraction.markup import extract_grunt_sections, extract_leader_slots
from rocket_lineups.species.base import SpeciesLookup
from rocket_lineups.utils.logging import get_logger, log_extraction_step, with_pipeline_context

# Called with (next page label, pages done, total pages), and once more when every page is done
ProgressCallback = Callable[[str, int, int], None]


def join_url(host_url: str, path: str) -> str:
    return f"{host_url.rstrip('/')}/{path.lstrip('/')}"


class RocketInvasionPipeline:
    """Builds the full invasion dataset, fetching one guide page at a time."""

    def __init__(
        self,
        provider: PageMarkupProvider,
        species: SpeciesLookup,
        roster: Sequence[RosterEntry] = DEFAULT_ROSTER,
        host_url: str | None = None,
        grunt_guide_path: str | None = None,
        portraits: PortraitResolver | None = None,
        rng: random.Random | None = None,
    ):
        config = get_config()
        self.provider = provider
        self.species = species
        self.roster = tuple(roster)
        self.host_url = host_url or config.host_url
        self.grunt_guide_path = grunt_guide_path or config.grunt_guide_path
        self.portraits = portraits or PortraitResolver(config.portrait_base_url, rng=rng)
        self.logger = get_logger(__name__)

    @property
    def grunt_guide_url(self) -> str:
        return join_url(self.host_url, self.grunt_guide_path)

    def leader_guide_url(self, entry: RosterEntry) -> str:
        return join_url(
            self.host_url, f"/post/guide/rocket-{entry.kind.value.lower()}-{entry.name.lower()}-counters/"
        )

    @log_extraction_step("grunt_invasions")
    async def build_grunt_invasions(self) -> list[InvasionRecord]:
        document = await self.provider.fetch_rendered_page(self.grunt_guide_url)
        sections = extract_grunt_sections(document)
        records = [build_grunt_invasion(section, self.species, self.portraits) for section in sections]
        return order_invasions(records)

    @log_extraction_step("leader_invasions")
    async def build_leader_invasions(self, entry: RosterEntry) -> list[InvasionRecord]:
        document = await self.provider.fetch_rendered_page(self.leader_guide_url(entry))
        slots = extract_leader_slots(document, entry.kind)
        record = build_leader_invasion(entry, slots, self.species, self.portraits)
        self.logger.info(
            "Built leader invasion", adversary=entry.label, category=record.category, entries=len(record.lineup)
        )
        return order_invasions([record])

    async def run(self, progress_callback: ProgressCallback | None = None) -> list[InvasionRecord]:
        """Run grunt extraction, then every roster entry in order, and concatenate the results.

        Any acquisition or species resolution failure aborts the whole run.
        """
        total = 1 + len(self.roster)

        with with_pipeline_context("rocket_invasions", pages=total) as logger:
            logger.info("Starting invasion extraction", roster=[entry.label for entry in self.roster])

            if progress_callback:
                progress_callback("grunt battle guide", 0, total)
            invasions = await self.build_grunt_invasions()

            for done, entry in enumerate(self.roster, start=1):
                if progress_callback:
                    progress_callback(entry.label, done, total)
                invasions.extend(await self.build_leader_invasions(entry))

            if progress_callback:
                progress_callback("invasion dataset", total, total)

            logger.info(
                "Invasion extraction complete",
                invasion_count=len(invasions),
                special_count=sum(1 for record in invasions if record.is_special),
            )
            return invasions
