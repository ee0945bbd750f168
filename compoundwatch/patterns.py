"""
Compound Pattern Catalog

A compound pattern is a higher-order signal: at least `min_topics` of its
constituent topics observed together. Each pattern carries a boost factor
for scoring and canonical (English) narrative metadata for display.

The catalog is static data, validated once at load time. A pattern that can
never activate (threshold above its topic count, unknown topic id) is a
broken deployment and is rejected with CatalogError before anything runs.

Translations of the narrative fields live in compoundwatch/locales and are
checked for structural parity by compoundwatch.localization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from compoundwatch.errors import CatalogError


# The five narrative lists, in display order
NARRATIVE_CATEGORIES: tuple[str, ...] = (
    "key_judgments",
    "indicators",
    "confirmation_signals",
    "assumptions",
    "change_triggers",
)


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class Narrative:
    """Five parallel bullet lists explaining a compound pattern."""
    key_judgments: tuple[str, ...] = ()
    indicators: tuple[str, ...] = ()
    confirmation_signals: tuple[str, ...] = ()
    assumptions: tuple[str, ...] = ()
    change_triggers: tuple[str, ...] = ()

    def get(self, category: str) -> tuple[str, ...]:
        if category not in NARRATIVE_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def as_dict(self) -> dict[str, list[str]]:
        return {c: list(self.get(c)) for c in NARRATIVE_CATEGORIES}


@dataclass(frozen=True)
class CompoundPattern:
    id: str
    topics: tuple[str, ...]     # Topic ids that co-occur
    min_topics: int             # Topics required to activate
    name: str
    prediction: str             # One-line outlook shown with the alert
    boost_factor: float         # Score multiplier when active
    narrative: Narrative = field(default_factory=Narrative)


@dataclass(frozen=True)
class PatternTranslation:
    """Display fields of one pattern in one locale. Identifiers never change."""
    name: str
    prediction: str
    narrative: Narrative


# ============================================================
# THE CATALOG
# ============================================================

_PERSISTENCE = "Constituent topics persist across two or more consecutive refresh cycles"

COMPOUND_PATTERNS: tuple[CompoundPattern, ...] = (
    CompoundPattern(
        id="trade-war-escalation",
        topics=("tariffs", "china-tensions", "supply-chain"),
        min_topics=2,
        name="Trade War Escalation",
        prediction="Expect market volatility and supply chain disruption",
        boost_factor=1.5,
        narrative=Narrative(
            key_judgments=(
                "Tariff measures are being paired with bilateral political friction",
                "Retaliation risk is rising faster than negotiation signals",
            ),
            indicators=(
                "New or expanded tariff schedules announced",
                "Official US-China statements hardening in tone",
                "Freight and port delay reports increasing",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Neither side has a short-term incentive to de-escalate",),
            change_triggers=(
                "Announcement of a negotiation round or tariff pause",
                "Exemption lists expanded for critical goods",
            ),
        ),
    ),
    CompoundPattern(
        id="stagflation-risk",
        topics=("inflation", "fed-rates", "layoffs"),
        min_topics=2,
        name="Stagflation Risk",
        prediction="Economic headwinds combining - defensive positioning advised",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "Price pressure persists while labor demand weakens",
                "Policy room to cut rates is narrowing",
            ),
            indicators=(
                "Inflation prints above expectations",
                "Layoff announcements spreading beyond a single sector",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Central bank keeps prioritising inflation over growth",),
            change_triggers=("Two consecutive soft inflation readings",),
        ),
    ),
    CompoundPattern(
        id="geopolitical-crisis",
        topics=("russia-ukraine", "israel-gaza", "china-tensions"),
        min_topics=2,
        name="Multi-Front Geopolitical Crisis",
        prediction="Multiple conflict zones active - risk-off sentiment likely",
        boost_factor=2.0,
        narrative=Narrative(
            key_judgments=(
                "Several theatres are competing for diplomatic and military attention",
                "Escalation in one theatre raises opportunism risk in another",
            ),
            indicators=(
                "Simultaneous coverage of two or more active conflict zones",
                "Emergency diplomatic sessions called",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Major powers remain unwilling to intervene directly",),
            change_triggers=("Ceasefire agreed in any one theatre",),
        ),
    ),
    CompoundPattern(
        id="tech-regulatory-storm",
        topics=("ai-regulation", "big-tech", "crypto"),
        min_topics=2,
        name="Tech Regulatory Storm",
        prediction="Coordinated regulatory action may impact tech sector",
        boost_factor=1.4,
        narrative=Narrative(
            key_judgments=(
                "Regulators are moving on several technology fronts at once",
                "Compliance costs for large platforms are likely to rise",
            ),
            indicators=(
                "New AI or antitrust rules proposed",
                "Enforcement actions against major platforms",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Political consensus for tech regulation holds",),
            change_triggers=("Court ruling limiting regulator authority",),
        ),
    ),
    CompoundPattern(
        id="financial-stress",
        topics=("bank-crisis", "fed-rates", "housing"),
        min_topics=2,
        name="Financial Sector Stress",
        prediction="Banking sector under pressure - monitor closely",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Rate levels are exposing balance-sheet weaknesses in lenders",
                "Housing exposure amplifies bank funding risk",
            ),
            indicators=(
                "Reports of deposit outflows or bank failures",
                "Mortgage rates rising while home prices soften",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Deposit insurance backstops are not expanded",),
            change_triggers=("Emergency liquidity facility announced",),
        ),
    ),
    CompoundPattern(
        id="nuclear-escalation",
        topics=("russia-ukraine", "iran", "nuclear"),
        min_topics=2,
        name="Nuclear Escalation",
        prediction="Heightened nuclear rhetoric - extreme risk-off likely",
        boost_factor=2.5,
        narrative=Narrative(
            key_judgments=(
                "Nuclear signalling is appearing alongside active conflict",
                "Miscalculation risk is elevated",
            ),
            indicators=(
                "Official references to nuclear readiness or doctrine",
                "Enrichment or missile test reports",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Rhetoric remains primarily coercive rather than operational",),
            change_triggers=("Resumption of arms control or inspection talks",),
        ),
    ),
    CompoundPattern(
        id="middle-east-escalation",
        topics=("israel-gaza", "iran"),
        min_topics=2,
        name="Middle East Escalation",
        prediction="Regional conflict expansion risk",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "The Gaza conflict is drawing in regional state actors",
                "Direct state-to-state exchanges are more likely",
            ),
            indicators=(
                "Strikes attributed to or against Iranian forces",
                "Shipping or airspace restrictions in the region",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Proxy networks remain responsive to Tehran",),
            change_triggers=("Hostage or ceasefire deal concluded",),
        ),
    ),
    CompoundPattern(
        id="energy-supply-shock",
        topics=("russia-ukraine", "iran", "supply-chain"),
        min_topics=2,
        name="Energy Supply Shock",
        prediction="Energy price spikes and supply disruption expected",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Conflict in producer regions threatens energy flows",
                "Logistics bottlenecks limit substitution",
            ),
            indicators=(
                "Pipeline, tanker or refinery disruptions reported",
                "Spot energy prices moving sharply",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Strategic reserves are not released at scale",),
            change_triggers=("Coordinated reserve release by consumer nations",),
        ),
    ),
    CompoundPattern(
        id="recession-signal",
        topics=("layoffs", "housing", "fed-rates"),
        min_topics=2,
        name="Recession Signal",
        prediction="Classic recession indicators aligning",
        boost_factor=1.9,
        narrative=Narrative(
            key_judgments=(
                "Labor and housing are weakening under restrictive policy",
                "Consumer demand is likely to slow",
            ),
            indicators=(
                "Broad-based job cut announcements",
                "Falling home sales and construction activity",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Policy easing arrives too late to offset the slowdown",),
            change_triggers=("Rate cuts paired with a rebound in hiring",),
        ),
    ),
    CompoundPattern(
        id="inflation-spiral",
        topics=("inflation", "supply-chain", "climate"),
        min_topics=2,
        name="Inflation Spiral",
        prediction="Multiple inflation drivers converging",
        boost_factor=1.6,
        narrative=Narrative(
            key_judgments=(
                "Supply and weather shocks are feeding price pressure together",
                "Inflation expectations risk de-anchoring",
            ),
            indicators=(
                "Rising input and transport costs",
                "Weather events hitting production regions",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Shocks are not offset by weaker demand",),
            change_triggers=("Sustained easing in freight and commodity prices",),
        ),
    ),
    CompoundPattern(
        id="dollar-stress",
        topics=("fed-rates", "crypto", "china-tensions"),
        min_topics=2,
        name="Dollar Stress",
        prediction="Currency instability concerns rising",
        boost_factor=1.5,
        narrative=Narrative(
            key_judgments=(
                "Monetary policy and geopolitics are testing dollar confidence",
                "Alternative stores of value are attracting attention",
            ),
            indicators=(
                "Large moves in dollar index or treasury demand",
                "Crypto inflows tied to currency hedging",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("No coordinated currency intervention",),
            change_triggers=("Stabilising statements from major central banks",),
        ),
    ),
    CompoundPattern(
        id="ai-disruption-wave",
        topics=("ai-regulation", "layoffs", "big-tech"),
        min_topics=2,
        name="AI Disruption Wave",
        prediction="AI-driven workforce disruption accelerating",
        boost_factor=1.6,
        narrative=Narrative(
            key_judgments=(
                "Automation is being cited directly in workforce decisions",
                "Regulatory response is trailing adoption",
            ),
            indicators=(
                "Layoffs attributed to AI restructuring",
                "Large platform investment in AI capacity",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Productivity gains are captured before reskilling scales",),
            change_triggers=("Binding labor protections for AI deployment",),
        ),
    ),
    CompoundPattern(
        id="disinfo-storm",
        topics=("deepfake", "election", "ai-regulation"),
        min_topics=2,
        name="Disinfo Storm",
        prediction="AI-generated misinformation concerns surging",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Synthetic media is being deployed around electoral events",
                "Platform moderation capacity is under strain",
            ),
            indicators=(
                "Viral deepfakes of candidates or officials",
                "Emergency guidance from election authorities",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Detection tooling lags generation tooling",),
            change_triggers=("Mandatory provenance labelling enforced",),
        ),
    ),
    CompoundPattern(
        id="pandemic-redux",
        topics=("pandemic", "supply-chain", "inflation"),
        min_topics=2,
        name="Pandemic Redux",
        prediction="Health crisis with economic spillover",
        boost_factor=2.0,
        narrative=Narrative(
            key_judgments=(
                "A health emergency is starting to disrupt economic activity",
                "Supply constraints may re-emerge",
            ),
            indicators=(
                "Outbreak reports with cross-border spread",
                "Factory or port closures tied to health measures",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Containment measures are reintroduced",),
            change_triggers=("Effective treatment or containment confirmed",),
        ),
    ),
    CompoundPattern(
        id="climate-shock",
        topics=("climate", "supply-chain", "inflation"),
        min_topics=2,
        name="Climate Shock",
        prediction="Weather events disrupting economy",
        boost_factor=1.6,
        narrative=Narrative(
            key_judgments=(
                "Climate events are causing measurable economic disruption",
                "Insurance and rebuilding costs feed into prices",
            ),
            indicators=(
                "Major wildfire, flood or hurricane damage",
                "Transport routes closed by weather",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Adaptation spending does not offset near-term losses",),
            change_triggers=("Seasonal risk window closes without further events",),
        ),
    ),
    CompoundPattern(
        id="social-pressure",
        topics=("inflation", "layoffs", "immigration", "election"),
        min_topics=3,
        name="Social Pressure",
        prediction="Economic stress combining with political flashpoints",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "Economic grievances are being channelled into political campaigns",
                "Immigration is becoming a focal point of that frustration",
            ),
            indicators=(
                "Campaign messaging centred on cost of living",
                "Polling shifts tied to immigration",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Election calendar keeps these issues in focus",),
            change_triggers=("Significant improvement in real wages",),
        ),
    ),
    CompoundPattern(
        id="cyber-warfare-escalation",
        topics=("state-hacking", "russia-ukraine", "china-tensions"),
        min_topics=2,
        name="Cyber Warfare Escalation",
        prediction="State-sponsored cyber operations intensifying",
        boost_factor=2.0,
        narrative=Narrative(
            key_judgments=(
                "State cyber operations are tracking kinetic and diplomatic tension",
                "Attribution statements are becoming more frequent",
            ),
            indicators=(
                "Government attribution of intrusions to state actors",
                "Advisories on campaigns against critical sectors",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Cyber operations stay below the threshold of armed attack",),
            change_triggers=("Bilateral cyber norms agreement",),
        ),
    ),
    CompoundPattern(
        id="critical-infra-attack",
        topics=("cyberattack", "energy-transition", "supply-chain"),
        min_topics=2,
        name="Critical Infrastructure Attack",
        prediction="Infrastructure vulnerability exposure rising",
        boost_factor=2.2,
        narrative=Narrative(
            key_judgments=(
                "Attacks are reaching operational infrastructure, not just data",
                "New energy assets widen the attack surface",
            ),
            indicators=(
                "Ransomware affecting utilities or logistics operators",
                "Grid or pipeline outages linked to intrusions",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Operators have limited segmentation between IT and OT",),
            change_triggers=("Mandatory incident reporting and hardening deadlines",),
        ),
    ),
    CompoundPattern(
        id="cyber-financial-attack",
        topics=("cyberattack", "bank-crisis", "credit-stress"),
        min_topics=2,
        name="Cyber-Financial Attack",
        prediction="Financial system cyber vulnerability detected",
        boost_factor=2.0,
        narrative=Narrative(
            key_judgments=(
                "Cyber incidents are coinciding with financial fragility",
                "Confidence shocks could spread through funding markets",
            ),
            indicators=(
                "Breaches at banks or payment processors",
                "Widening credit spreads after incidents",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Incidents are not contained within a single institution",),
            change_triggers=("Regulators confirm systemic containment",),
        ),
    ),
    CompoundPattern(
        id="energy-weaponization",
        topics=("oil-opec", "sanctions", "russia-ukraine"),
        min_topics=2,
        name="Energy Weaponization",
        prediction="Energy used as geopolitical leverage - price volatility expected",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "Producers are using supply decisions as political leverage",
                "Sanctions are reshaping energy trade routes",
            ),
            indicators=(
                "Production cuts announced outside market cycles",
                "New sanctions targeting energy exports",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Buyers lack short-term alternatives",),
            change_triggers=("Production increase agreed with consumer nations",),
        ),
    ),
    CompoundPattern(
        id="resource-war",
        topics=("rare-earths", "china-tensions", "sanctions"),
        min_topics=2,
        name="Resource War",
        prediction="Critical mineral supply under geopolitical pressure",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Critical minerals are becoming instruments of state competition",
                "Export controls are likely to broaden",
            ),
            indicators=(
                "Export restrictions on rare earths or processing technology",
                "Stockpiling programs announced",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Processing capacity stays geographically concentrated",),
            change_triggers=("New non-aligned supply coming online",),
        ),
    ),
    CompoundPattern(
        id="green-transition-shock",
        topics=("energy-transition", "rare-earths", "china-tensions"),
        min_topics=2,
        name="Green Transition Shock",
        prediction="Energy transition supply chain bottleneck forming",
        boost_factor=1.5,
        narrative=Narrative(
            key_judgments=(
                "Transition targets depend on contested mineral supply",
                "Project timelines are at risk of slipping",
            ),
            indicators=(
                "Price spikes in lithium, cobalt or related inputs",
                "Delayed renewable projects citing component shortages",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Recycling and substitution remain small-scale",),
            change_triggers=("Bilateral supply agreements signed",),
        ),
    ),
    CompoundPattern(
        id="food-crisis-spiral",
        topics=("food-security", "extreme-weather", "supply-chain"),
        min_topics=2,
        name="Food Crisis Spiral",
        prediction="Climate-driven food supply disruption accelerating",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "Weather damage and logistics failures compound food scarcity",
                "Import-dependent regions are most exposed",
            ),
            indicators=(
                "Crop failure or export ban announcements",
                "Food price index rising month over month",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Emergency food aid does not scale quickly",),
            change_triggers=("Strong harvest forecasts in major exporters",),
        ),
    ),
    CompoundPattern(
        id="climate-migration",
        topics=("extreme-weather", "refugee-crisis", "civil-unrest"),
        min_topics=2,
        name="Climate Migration Pressure",
        prediction="Climate displacement triggering social instability",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Weather disasters are displacing populations at scale",
                "Host communities show signs of strain",
            ),
            indicators=(
                "Displacement figures after extreme weather",
                "Protests in receiving regions",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Resettlement funding remains limited",),
            change_triggers=("Large international relief package",),
        ),
    ),
    CompoundPattern(
        id="agricultural-collapse",
        topics=("agriculture", "extreme-weather", "inflation"),
        min_topics=2,
        name="Agricultural Collapse Signal",
        prediction="Crop failures feeding inflation pipeline",
        boost_factor=1.6,
        narrative=Narrative(
            key_judgments=(
                "Drought and heat are reducing agricultural output",
                "Food inflation is likely to follow",
            ),
            indicators=(
                "Harvest downgrades in key producing regions",
                "Fertilizer cost or availability problems",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Inventories are too thin to absorb the shortfall",),
            change_triggers=("Seasonal rainfall returns to normal",),
        ),
    ),
    CompoundPattern(
        id="sovereign-debt-crisis",
        topics=("sovereign-debt", "fed-rates", "credit-stress"),
        min_topics=2,
        name="Sovereign Debt Crisis",
        prediction="Government debt sustainability in question",
        boost_factor=2.0,
        narrative=Narrative(
            key_judgments=(
                "Higher rates are raising sovereign refinancing costs",
                "Credit markets are repricing fiscal risk",
            ),
            indicators=(
                "Rating downgrades or negative outlooks",
                "Rising bond yields at auctions",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("No fiscal consolidation is announced",),
            change_triggers=("Credible deficit reduction plan",),
        ),
    ),
    CompoundPattern(
        id="credit-contagion",
        topics=("credit-stress", "bank-crisis", "housing"),
        min_topics=2,
        name="Credit Contagion",
        prediction="Credit stress spreading across sectors",
        boost_factor=1.9,
        narrative=Narrative(
            key_judgments=(
                "Credit stress is moving from isolated borrowers to lenders",
                "Real estate is a likely transmission channel",
            ),
            indicators=(
                "Rising defaults in high yield and commercial property",
                "Lenders tightening standards",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Losses are concentrated in leveraged balance sheets",),
            change_triggers=("Credit spreads narrow for several weeks",),
        ),
    ),
    CompoundPattern(
        id="dedollarization-signal",
        topics=("trade-blocs", "sanctions", "crypto"),
        min_topics=2,
        name="Dedollarization Signal",
        prediction="Alternative payment systems gaining traction",
        boost_factor=1.6,
        narrative=Narrative(
            key_judgments=(
                "Sanctioned and non-aligned states are building payment alternatives",
                "Trade blocs are formalising non-dollar settlement",
            ),
            indicators=(
                "Bloc summits announcing settlement mechanisms",
                "Cross-border deals priced outside the dollar",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Alternative systems gain enough liquidity to be usable",),
            change_triggers=("Sanctions relief for major participants",),
        ),
    ),
    CompoundPattern(
        id="social-tinderbox",
        topics=("civil-unrest", "inflation", "layoffs"),
        min_topics=2,
        name="Social Tinderbox",
        prediction="Economic pain fueling civil unrest risk",
        boost_factor=1.9,
        narrative=Narrative(
            key_judgments=(
                "Cost-of-living pressure is turning into street mobilisation",
                "Job losses widen the protest base",
            ),
            indicators=(
                "Strikes or protests citing prices or wages",
                "Large layoff announcements in affected regions",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Government relief measures are insufficient",),
            change_triggers=("Targeted subsidies or wage settlements",),
        ),
    ),
    CompoundPattern(
        id="democratic-stress",
        topics=("election", "political-violence", "civil-unrest"),
        min_topics=2,
        name="Democratic Stress",
        prediction="Political institutions under pressure",
        boost_factor=1.8,
        narrative=Narrative(
            key_judgments=(
                "Electoral contests are accompanied by violence or threats",
                "Trust in institutions is eroding",
            ),
            indicators=(
                "Attacks or plots against officials",
                "Mass protests disputing electoral processes",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Security services remain politically neutral",),
            change_triggers=("Cross-party acceptance of results",),
        ),
    ),
    CompoundPattern(
        id="global-protest-wave",
        topics=("civil-unrest", "food-security", "inflation"),
        min_topics=2,
        name="Global Protest Wave",
        prediction="Cost-of-living protests spreading",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Food and price shocks are driving protests in several countries",
                "Unrest is spreading across borders",
            ),
            indicators=(
                "Protests in multiple countries citing food prices",
                "Governments imposing price controls",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Price pressure stays elevated through the season",),
            change_triggers=("Global food prices fall back",),
        ),
    ),
    CompoundPattern(
        id="arms-race-acceleration",
        topics=("arms-race", "nato-defense", "russia-ukraine"),
        min_topics=2,
        name="Arms Race Acceleration",
        prediction="Military spending and procurement surging",
        boost_factor=1.7,
        narrative=Narrative(
            key_judgments=(
                "Alliance members are committing to sustained defense increases",
                "Procurement is shifting toward long-term production",
            ),
            indicators=(
                "Defense budget increases announced",
                "Large multi-year weapons contracts",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("The war in Ukraine continues to anchor threat perception",),
            change_triggers=("Negotiated settlement in Ukraine",),
        ),
    ),
    CompoundPattern(
        id="multi-domain-conflict",
        topics=("cyberattack", "space-military", "arms-race"),
        min_topics=2,
        name="Multi-Domain Conflict",
        prediction="Warfare expanding across cyber, space, and conventional domains",
        boost_factor=2.3,
        narrative=Narrative(
            key_judgments=(
                "Competition is expanding into cyber and space simultaneously",
                "Cross-domain escalation paths are harder to manage",
            ),
            indicators=(
                "Anti-satellite tests or space force announcements",
                "Cyber operations paired with military buildups",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("No shared norms govern space and cyber operations",),
            change_triggers=("Agreement on space debris or ASAT testing limits",),
        ),
    ),
    CompoundPattern(
        id="escalation-ladder",
        topics=("nuclear", "arms-race", "russia-ukraine", "china-tensions"),
        min_topics=2,
        name="Escalation Ladder",
        prediction="Conflict intensity climbing across theaters",
        boost_factor=2.5,
        narrative=Narrative(
            key_judgments=(
                "Conventional buildups and nuclear signalling are rising together",
                "Several great-power rivalries are escalating in parallel",
            ),
            indicators=(
                "Nuclear rhetoric alongside arms deliveries",
                "Military exercises near contested borders",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Deterrence holds but with thinner margins",),
            change_triggers=("Leader-level crisis communication established",),
        ),
    ),
    CompoundPattern(
        id="systemic-fragility",
        topics=("sovereign-debt", "supply-chain", "cyberattack", "extreme-weather"),
        min_topics=3,
        name="Systemic Fragility",
        prediction="Multiple system stress points converging - cascading failure risk",
        boost_factor=2.5,
        narrative=Narrative(
            key_judgments=(
                "Independent stress points are coinciding",
                "Buffers that absorb single shocks are being drawn down",
            ),
            indicators=(
                "Fiscal strain alongside infrastructure disruptions",
                "Weather and cyber incidents hitting logistics",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("Shocks are correlated rather than coincidental",),
            change_triggers=("Two or more stress points resolve",),
        ),
    ),
    CompoundPattern(
        id="polycrisis",
        topics=("civil-unrest", "food-security", "inflation", "extreme-weather", "refugee-crisis"),
        min_topics=3,
        name="Polycrisis",
        prediction="Simultaneous crises reinforcing each other - monitor all fronts",
        boost_factor=3.0,
        narrative=Narrative(
            key_judgments=(
                "Humanitarian, economic and climate crises are reinforcing each other",
                "Response capacity is being outpaced",
            ),
            indicators=(
                "Displacement and food insecurity reported in the same regions",
                "Unrest following weather or price shocks",
            ),
            confirmation_signals=(_PERSISTENCE,),
            assumptions=("International coordination stays fragmented",),
            change_triggers=("Coordinated multilateral response funded",),
        ),
    ),
)


# ============================================================
# VALIDATION
# ============================================================

def validate_catalog(
    patterns: Iterable[CompoundPattern],
    topic_ids: Iterable[str],
) -> dict[str, CompoundPattern]:
    """
    Reject catalogs containing patterns that are malformed or can never fire.

    Raises:
        CatalogError naming the first offending pattern.

    Returns:
        Mapping of pattern id to pattern, in declaration order.
    """
    known = set(topic_ids)
    by_id: dict[str, CompoundPattern] = {}

    for p in patterns:
        if not p.id:
            raise CatalogError("Compound pattern with empty id")
        if p.id in by_id:
            raise CatalogError(f"Duplicate compound pattern id '{p.id}'")
        if len(p.topics) < 2:
            raise CatalogError(
                f"Pattern '{p.id}' needs at least 2 topics, has {len(p.topics)}"
            )
        if len(set(p.topics)) != len(p.topics):
            raise CatalogError(f"Pattern '{p.id}' lists a topic more than once")
        unknown = [t for t in p.topics if t not in known]
        if unknown:
            raise CatalogError(
                f"Pattern '{p.id}' references unknown topic(s): {', '.join(unknown)}"
            )
        if p.min_topics < 2 or p.min_topics > len(p.topics):
            raise CatalogError(
                f"Pattern '{p.id}' has min_topics={p.min_topics}; "
                f"must be between 2 and {len(p.topics)}"
            )
        if p.boost_factor <= 0:
            raise CatalogError(
                f"Pattern '{p.id}' has non-positive boost_factor {p.boost_factor}"
            )
        by_id[p.id] = p

    return by_id
