"""Static muscle catalogue served by ``GET /api/muscles/<id>``."""

import copy
from typing import Any

_CREATED = "2024-01-01T00:00:00+00:00"


def _muscle(
    muscle_id: str,
    name: str,
    short_description: str,
    description: str,
    origin: str,
    insertion: str,
    functions: list[str],
    movements: list[str],
    conditions: list[tuple[str, str]],
) -> dict[str, Any]:
    return {
        "id": muscle_id,
        "name": name,
        "shortDescription": short_description,
        "description": description,
        "image": f"/images/muscles/{muscle_id}.png",
        "origin": origin,
        "insertion": insertion,
        "functions": functions,
        "movements": movements,
        "conditions": [
            {"id": f"{muscle_id}-condition-{i}", "name": cname, "description": cdesc}
            for i, (cname, cdesc) in enumerate(conditions, start=1)
        ],
        "videos": [],
        "createdAt": _CREATED,
        "updatedAt": _CREATED,
    }


MUSCLE_DATA: dict[str, dict[str, Any]] = {
    "biceps": _muscle(
        "biceps",
        "Biceps Brachii",
        "Two-headed muscle on the front of the upper arm.",
        "The biceps brachii crosses both the shoulder and elbow joints and is the main supinator of the forearm.",
        "Short head: coracoid process; long head: supraglenoid tubercle of the scapula",
        "Radial tuberosity and bicipital aponeurosis",
        ["Elbow flexion", "Forearm supination", "Assists shoulder flexion"],
        ["Bicep curl", "Chin-up", "Turning a screwdriver"],
        [
            ("Biceps tendinitis", "Inflammation of the long head tendon, usually from overuse."),
            ("Distal biceps rupture", "Tear of the tendon at the elbow, often during heavy lifting."),
        ],
    ),
    "triceps": _muscle(
        "triceps",
        "Triceps Brachii",
        "Three-headed muscle on the back of the upper arm.",
        "The triceps brachii is the primary extensor of the elbow; its long head also crosses the shoulder.",
        "Long head: infraglenoid tubercle; lateral and medial heads: posterior humerus",
        "Olecranon process of the ulna",
        ["Elbow extension", "Assists shoulder extension"],
        ["Push-up", "Dip", "Overhead press lockout"],
        [("Triceps tendinitis", "Irritation of the tendon at the olecranon from repetitive extension.")],
    ),
    "quadriceps": _muscle(
        "quadriceps",
        "Quadriceps",
        "Four-part muscle group on the front of the thigh.",
        "Rectus femoris and the three vasti converge on the patellar tendon to extend the knee.",
        "Anterior inferior iliac spine (rectus femoris) and femoral shaft (vasti)",
        "Tibial tuberosity via the patellar ligament",
        ["Knee extension", "Hip flexion (rectus femoris)"],
        ["Squat", "Lunge", "Stair climbing"],
        [
            ("Quadriceps strain", "Overstretching or tearing of the muscle fibres, common in sprinting."),
            ("Patellar tendinopathy", "Degeneration of the patellar tendon from repeated jumping."),
        ],
    ),
    "deltoids": _muscle(
        "deltoids",
        "Deltoid Muscle",
        "Rounded muscle forming the contour of the shoulder.",
        "The deltoid has anterior, lateral and posterior fibres that move the arm in every plane.",
        "Lateral clavicle, acromion and spine of the scapula",
        "Deltoid tuberosity of the humerus",
        ["Shoulder abduction", "Shoulder flexion", "Shoulder extension"],
        ["Lateral raise", "Overhead press", "Rear delt fly"],
        [("Deltoid strain", "Pain on lifting the arm after overload of the muscle fibres.")],
    ),
    "pectoralis": _muscle(
        "pectoralis",
        "Pectoralis Major",
        "Large fan-shaped muscle of the chest.",
        "The pectoralis major has clavicular and sternocostal heads that adduct and internally rotate the arm.",
        "Medial clavicle, sternum and costal cartilages of ribs 1-6",
        "Lateral lip of the intertubercular groove of the humerus",
        ["Shoulder adduction", "Internal rotation", "Shoulder flexion (clavicular head)"],
        ["Bench press", "Push-up", "Cable fly"],
        [("Pectoral tear", "Rupture near the humeral insertion, typically during a heavy bench press.")],
    ),
    "abdominals": _muscle(
        "abdominals",
        "Abdominal Muscles",
        "Muscles of the anterior and lateral abdominal wall.",
        "Rectus abdominis, the obliques and transversus abdominis flex and stabilise the trunk.",
        "Pubic crest and symphysis (rectus abdominis); lower ribs and iliac crest (obliques)",
        "Xiphoid process and costal cartilages 5-7; linea alba",
        ["Trunk flexion", "Trunk rotation", "Raising intra-abdominal pressure"],
        ["Crunch", "Plank", "Russian twist"],
        [("Diastasis recti", "Separation of the rectus abdominis along the linea alba.")],
    ),
}


def get_muscle(muscle_id: str) -> dict[str, Any] | None:
    """Return a copy of the muscle record, or ``None`` for an unknown id."""
    muscle = MUSCLE_DATA.get(muscle_id)
    return copy.deepcopy(muscle) if muscle is not None else None
