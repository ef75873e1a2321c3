"""ProSolo 2024 PAX index, from the SCCA ProSolo rules."""

from __future__ import annotations

from paxcalc.data._tables import group
from paxcalc.models.pax_index import IndexType, PaxIndex

PROSOLO_2024 = PaxIndex(
    year=2024,
    index_type=IndexType.PROSOLO.value,
    version="2024.1.0",
    release_date="2024-01-01",
    last_updated="2024-01-01",
    class_groups=(
        group("street", "Street", "Street Category - Minimal modifications allowed", [
            ("SS", "Super Street", 0.844),
            ("AS", "A Street", 0.83),
            ("BS", "B Street", 0.821),
            ("CS", "C Street", 0.806),
            ("DS", "D Street", 0.806),
            ("ES", "E Street", 0.787),
            ("FS", "F Street", 0.815),
            ("GS", "G Street", 0.787),
            ("HS", "H Street", 0.776),
        ]),
        group("street-touring", "Street Touring", "Street Touring Category - Limited modifications", [
            ("AST", "A Street Touring", 0.832),
            ("BST", "B Street Touring", 0.83),
            ("CST", "C Street Touring", 0.824),
            ("DST", "D Street Touring", 0.814),
            ("EST", "E Street Touring", 0.809),
            ("GST", "G Street Touring", 0.81),
            ("SST", "Super Street Touring", 0.833),
        ]),
        group("street-prepared", "Street Prepared", "Street Prepared Category - Significant modifications allowed", [
            ("SSP", "Super Street Prepared", 0.863),
            ("CSP", "C Street Prepared", 0.857),
            ("DSP", "D Street Prepared", 0.847),
            ("ESP", "E Street Prepared", 0.839),
            ("FSP", "F Street Prepared", 0.826),
        ]),
        group("street-modified", "Street Modified", "Street Modified Category - Extensive modifications allowed", [
            ("SSM", "Super Street Modified", 0.878),
            ("SM", "Street Modified", 0.869),
            ("SMF", "Street Modified FWD", 0.855),
        ]),
        group("prepared", "Prepared", "Prepared Category - Race-prepared vehicles", [
            ("AP", "A Prepared", 0.891),
            ("BP", "B Prepared", 0.865),
            ("CP", "C Prepared", 0.865),
            ("DP", "D Prepared", 0.865),
            ("EP", "E Prepared", 0.858),
            ("FP", "F Prepared", 0.877),
            ("XP", "X Prepared", 0.891),
        ]),
        group("modified", "Modified", "Modified Category - Unlimited modifications", [
            ("AM", "A Modified", 1.0),
            ("BM", "B Modified", 0.978),
            ("CM", "C Modified", 0.897),
            ("DM", "D Modified", 0.923),
            ("EM", "E Modified", 0.933),
            ("FM", "F Modified", 0.925),
        ]),
        group("spec", "Spec", "Spec Category - Single-make classes", [
            ("SSC", "Solo Spec Coupe", 0.803),
            ("FSAE", "Formula SAE", 0.98),
            ("KM", "Kart Modified", 0.947),
            ("CSX", "C Street eXperimental", 0.83),
        ]),
        group("supplemental", "Supplemental", "Supplemental Category - Special classes", [
            ("XU", "Xtreme Unlimited", 0.867),
            ("XA", "Xtreme A", 0.849),
            ("XB", "Xtreme B", 0.856),
            ("EVX", "Electric Vehicle eXperimental", 0.83),
        ]),
        group("cam", "CAM", "Classic American Muscle", [
            ("CAM-T", "CAM Traditional", 0.819),
            ("CAM-C", "CAM Contemporary", 0.832),
            ("CAM-S", "CAM Sport", 0.849),
        ]),
        group("club-spec", "Club Spec", "Club Spec Classes", [
            ("CSM", "Club Spec Mustang", 0.83),
        ]),
    ),
)
