"""Static zone catalogue and surveyed intelligence records.

Zones are the BEZA / BEPZA / BHTPA sites listed on the investor portal.
Intelligence records exist only for surveyed zones; everything else is
synthesized by `src.engine.zone_intelligence`.
"""

from datetime import datetime, timezone
from decimal import Decimal

from src.models.zone import (
    ContaminationLevel,
    Economics,
    Environmental,
    Infrastructure,
    PortType,
    SoilQuality,
    SoilSuitability,
    SoilType,
    Tier,
    UtilityStatus,
    WaterQualityGrade,
    Zone,
    ZoneIntelligence,
    ZoneLocation,
)

_LOADED_AT = datetime.now(timezone.utc)


ZONE_INTELLIGENCE_DB: dict[str, ZoneIntelligence] = {
    "BEPZA-DHK-01": ZoneIntelligence(
        zone_id="BEPZA-DHK-01",
        soil_quality=SoilQuality(
            type=SoilType.ALLUVIAL,
            ph_level=Decimal("7.2"),
            drainage_rating=8,
            contamination_level=ContaminationLevel.LOW,
            suitability=SoilSuitability(
                heavy_industry=7, light_manufacturing=9, agriculture=4, technology=10,
            ),
        ),
        infrastructure=Infrastructure(
            power_line_distance=Decimal("2.1"),
            power_capacity_mw=150,
            power_reliability=Decimal("98.5"),
            gas_line_distance=Decimal("3.4"),
            gas_pressure_psi=250,
            gas_availability=Tier.HIGH,
            port_distance=Decimal("18.5"),
            nearest_port="Chittagong Seaport",
            port_type=PortType.SEAPORT,
            airport_distance=Decimal("12.3"),
            nearest_airport="Hazrat Shahjalal Intl",
            rail_distance=Decimal("5.2"),
            rail_capacity=Tier.HIGH,
            highway_distance=Decimal("1.8"),
            road_quality=9,
        ),
        utility_status=UtilityStatus(
            power_uptime=Decimal("99.2"),
            water_pressure=65,
            internet_speed=1000,
            waste_treatment=True,
            last_updated=_LOADED_AT,
        ),
        environmental=Environmental(
            air_quality_index=75,
            water_quality_grade=WaterQualityGrade.B,
            noise_level=58,
            green_cover_percent=22,
            effluent_treatment_plant=True,
            solar_potential_kwh=4500,
        ),
        economics=Economics(
            land_price_per_acre=Decimal("15000000"),
            labor_cost_per_month=Decimal("18000"),
            water_cost_per_unit=Decimal("25"),
            electricity_cost_per_kwh=Decimal("8.5"),
            development_cost_per_sqft=Decimal("450"),
        ),
    ),
    "BEPZA-CTG-02": ZoneIntelligence(
        zone_id="BEPZA-CTG-02",
        soil_quality=SoilQuality(
            type=SoilType.SANDY,
            ph_level=Decimal("6.8"),
            drainage_rating=9,
            contamination_level=ContaminationLevel.NONE,
            suitability=SoilSuitability(
                heavy_industry=9, light_manufacturing=8, agriculture=3, technology=7,
            ),
        ),
        infrastructure=Infrastructure(
            power_line_distance=Decimal("1.2"),
            power_capacity_mw=200,
            power_reliability=Decimal("99.1"),
            gas_line_distance=Decimal("2.1"),
            gas_pressure_psi=280,
            gas_availability=Tier.HIGH,
            port_distance=Decimal("8.3"),
            nearest_port="Chittagong Seaport",
            port_type=PortType.SEAPORT,
            airport_distance=Decimal("15.7"),
            nearest_airport="Shah Amanat Intl",
            rail_distance=Decimal("3.5"),
            rail_capacity=Tier.HIGH,
            highway_distance=Decimal("0.9"),
            road_quality=10,
        ),
        utility_status=UtilityStatus(
            power_uptime=Decimal("99.5"),
            water_pressure=70,
            internet_speed=1000,
            waste_treatment=True,
            last_updated=_LOADED_AT,
        ),
        environmental=Environmental(
            air_quality_index=68,
            water_quality_grade=WaterQualityGrade.A,
            noise_level=62,
            green_cover_percent=18,
            effluent_treatment_plant=True,
            solar_potential_kwh=5200,
        ),
        economics=Economics(
            land_price_per_acre=Decimal("12000000"),
            labor_cost_per_month=Decimal("16500"),
            water_cost_per_unit=Decimal("22"),
            electricity_cost_per_kwh=Decimal("8.2"),
            development_cost_per_sqft=Decimal("420"),
        ),
    ),
    "BEZA-BGD-03": ZoneIntelligence(
        zone_id="BEZA-BGD-03",
        soil_quality=SoilQuality(
            type=SoilType.LOAM,
            ph_level=Decimal("7.0"),
            drainage_rating=7,
            contamination_level=ContaminationLevel.NONE,
            suitability=SoilSuitability(
                heavy_industry=10, light_manufacturing=8, agriculture=5, technology=6,
            ),
        ),
        infrastructure=Infrastructure(
            power_line_distance=Decimal("4.5"),
            power_capacity_mw=180,
            power_reliability=Decimal("97.8"),
            gas_line_distance=Decimal("1.8"),
            gas_pressure_psi=300,
            gas_availability=Tier.HIGH,
            port_distance=Decimal("5.2"),
            nearest_port="Payra Seaport",
            port_type=PortType.SEAPORT,
            airport_distance=Decimal("85.0"),
            nearest_airport="Jessore Airport",
            rail_distance=Decimal("12.0"),
            rail_capacity=Tier.MEDIUM,
            highway_distance=Decimal("3.2"),
            road_quality=8,
        ),
        utility_status=UtilityStatus(
            power_uptime=Decimal("98.8"),
            water_pressure=62,
            internet_speed=500,
            waste_treatment=True,
            last_updated=_LOADED_AT,
        ),
        environmental=Environmental(
            air_quality_index=55,
            water_quality_grade=WaterQualityGrade.A,
            noise_level=48,
            green_cover_percent=28,
            effluent_treatment_plant=True,
            solar_potential_kwh=5800,
        ),
        economics=Economics(
            land_price_per_acre=Decimal("8500000"),
            labor_cost_per_month=Decimal("14000"),
            water_cost_per_unit=Decimal("20"),
            electricity_cost_per_kwh=Decimal("7.8"),
            development_cost_per_sqft=Decimal("380"),
        ),
    ),
}


SEZ_ZONES: list[Zone] = [
    Zone(
        id="sez-001",
        name="Bangabandhu Sheikh Mujib Shilpa Nagar (BSMSN)",
        type="SEZ",
        location=ZoneLocation(Decimal("22.7539"), Decimal("91.4679"), "Chattogram"),
        address="Mirsarai-Sitakunda, Chattogram",
        total_area="30,000 acres",
        available_plots=187,
        sectors=["Heavy Manufacturing", "Automotive", "Electronics", "Steel & Metal", "Chemicals", "Shipbuilding"],
        incentives=["10-year tax holiday", "100% duty-free capital machinery import",
                    "Full repatriation of capital & profits", "Export-oriented production benefits"],
        utilities=["24/7 uninterrupted power", "Deep-sea port connectivity", "Gas pipeline",
                   "ETP facilities", "Dedicated fire station"],
        land_price=Decimal("1500000"),
    ),
    Zone(
        id="epz-001",
        name="Dhaka Export Processing Zone (DEPZ)",
        type="EPZ",
        location=ZoneLocation(Decimal("23.8593"), Decimal("90.4250"), "Dhaka"),
        address="Ganakbari, Savar, Dhaka",
        total_area="217 hectares",
        available_plots=12,
        sectors=["Ready-Made Garments", "Electronics", "Pharmaceuticals", "IT Services", "Light Engineering"],
        incentives=["100% tax exemption on export earnings", "Duty-free import of machinery",
                    "Bonded warehouse facilities", "One-stop service center"],
        utilities=["Captive power plant backup", "Central effluent treatment plant", "24/7 security",
                   "Modern fire safety system", "Broadband internet"],
        land_price=Decimal("1000000"),
    ),
    Zone(
        id="epz-002",
        name="Chittagong Export Processing Zone (CEPZ)",
        type="EPZ",
        location=ZoneLocation(Decimal("22.3569"), Decimal("91.7832"), "Chattogram"),
        address="South Halishahar, Chattogram",
        total_area="263 hectares",
        available_plots=8,
        sectors=["Textiles", "Garments", "Pharmaceuticals", "Engineering", "Food Processing"],
        incentives=["Tax exemption for 10 years", "100% foreign ownership allowed",
                    "Zero customs duty", "Fast-track approvals"],
        utilities=["Port proximity (3 km)", "Dedicated power supply", "Advanced waste management",
                   "Customs bonded warehouse", "24/7 medical facilities"],
        land_price=Decimal("1200000"),
    ),
    Zone(
        id="hitech-001",
        name="Kaliakoir Hi-Tech Park",
        type="Hi-Tech Park",
        location=ZoneLocation(Decimal("24.0856"), Decimal("90.2167"), "Gazipur"),
        address="Kaliakoir, Gazipur",
        total_area="232 acres",
        available_plots=15,
        sectors=["Software Development", "Electronics Manufacturing", "IT Services", "Data Centers", "R&D"],
        incentives=["10-year tax holiday for IT companies", "100% FDI allowed",
                    "Duty-free import of IT equipment", "Special power tariff"],
        utilities=["High-speed fiber optic", "Dual power supply", "Solar backup",
                   "Advanced cooling systems", "Security surveillance"],
        land_price=Decimal("800000"),
    ),
    Zone(
        id="epz-003",
        name="Mongla Export Processing Zone (MEPZ)",
        type="EPZ",
        location=ZoneLocation(Decimal("22.4897"), Decimal("89.5981"), "Bagerhat"),
        address="Mongla Port Area, Bagerhat",
        total_area="125 hectares",
        available_plots=18,
        sectors=["Frozen Food", "Fish Processing", "Ship Breaking", "Light Engineering", "Logistics"],
        incentives=["Port-adjacent benefits", "5-year tax exemption", "Cold storage facilities",
                    "Export processing benefits"],
        utilities=["Mongla Port connectivity", "Cold chain infrastructure", "24/7 power",
                   "Water treatment plant", "Reefer facilities"],
        land_price=Decimal("600000"),
    ),
    Zone(
        id="sez-002",
        name="Jamalpur Economic Zone",
        type="SEZ",
        location=ZoneLocation(Decimal("25.0832"), Decimal("89.9403"), "Jamalpur"),
        address="Sarishabari, Jamalpur",
        total_area="1,000 acres",
        available_plots=34,
        sectors=["Agro Processing", "Textiles", "Ceramics", "Light Manufacturing", "Food Processing"],
        incentives=["Northern region development benefits", "7-year tax holiday",
                    "Land at subsidized rates", "Infrastructure support"],
        utilities=["Jamuna River proximity", "Railway connectivity", "Gas pipeline", "Power grid",
                   "Waste management"],
        land_price=Decimal("500000"),
    ),
    Zone(
        id="epz-004",
        name="Ishwardi Export Processing Zone (IEPZ)",
        type="EPZ",
        location=ZoneLocation(Decimal("24.1345"), Decimal("89.0664"), "Pabna"),
        address="Pakshi, Ishwardi, Pabna",
        total_area="200 hectares",
        available_plots=22,
        sectors=["Textiles", "Garments", "Leather Goods", "Light Engineering", "Agricultural Processing"],
        incentives=["Railway junction benefits", "Tax exemption for 10 years", "Duty-free machinery import",
                    "Export incentives"],
        utilities=["Railway siding", "Dedicated power substation", "Gas connection", "ETP",
                   "Workers dormitories"],
        land_price=Decimal("550000"),
    ),
    Zone(
        id="hitech-002",
        name="Bangabandhu Hi-Tech City, Kaliakoir",
        type="Hi-Tech Park",
        location=ZoneLocation(Decimal("24.0500"), Decimal("90.2000"), "Gazipur"),
        address="Chandra, Kaliakoir, Gazipur",
        total_area="1,500 acres",
        available_plots=45,
        sectors=["Software Development", "AI & Machine Learning", "Hardware Manufacturing", "Semiconductor",
                 "Robotics"],
        incentives=["15-year tax holiday for tech startups", "100% FDI", "R&D grants available",
                    "Intellectual property protection"],
        utilities=["10 Gbps fiber backbone", "Redundant power", "Data center ready", "Innovation labs",
                   "Incubation centers"],
        land_price=Decimal("900000"),
    ),
    Zone(
        id="sez-003",
        name="Sabrang Tourism Park",
        type="SEZ",
        location=ZoneLocation(Decimal("21.4344"), Decimal("92.1167"), "Cox's Bazar"),
        address="Teknaf, Cox's Bazar",
        total_area="1,000 acres",
        available_plots=25,
        sectors=["Tourism", "Hospitality", "Entertainment", "Recreation", "Eco-tourism"],
        incentives=["Tourism sector tax benefits", "Fast-track environmental clearance",
                    "Beach access rights", "Special tourism incentives"],
        utilities=["Beach-front access", "Sewage treatment", "Desalination plant", "Solar power", "Helipad"],
        land_price=Decimal("2000000"),
    ),
    Zone(
        id="epz-005",
        name="Uttara Export Processing Zone (UEPZ)",
        type="EPZ",
        location=ZoneLocation(Decimal("23.8721"), Decimal("90.3964"), "Dhaka"),
        address="Uttara, Dhaka",
        total_area="75 hectares",
        available_plots=6,
        sectors=["Garments", "Knitwear", "Accessories", "Packaging", "Quality Control Labs"],
        incentives=["Capital city proximity benefits", "Airport connectivity", "Tax exemption",
                    "Bonded warehouse"],
        utilities=["Hazrat Shahjalal Airport (8 km)", "Metro rail access", "Dual power feed",
                   "24/7 security", "Medical center"],
        land_price=Decimal("1300000"),
    ),
]

_ZONES_BY_ID = {z.id: z for z in SEZ_ZONES}


def get_zone(zone_id: str) -> Zone | None:
    return _ZONES_BY_ID.get(zone_id)


def list_zones(zone_type: str | None = None) -> list[Zone]:
    """Catalogue zones, optionally filtered by type (case-insensitive)."""
    if not zone_type:
        return list(SEZ_ZONES)
    wanted = zone_type.lower()
    return [z for z in SEZ_ZONES if z.type.lower() == wanted]
