"""Name and city pools keyed by language or country code."""

from typing import Dict, List

_FIRST_NAMES: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "male": [
            "James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph",
            "Thomas", "Christopher", "Charles", "Daniel", "Matthew", "Anthony", "Mark",
            "Steven", "Paul", "Andrew", "Joshua", "Kenneth", "Kevin", "Brian", "George",
        ],
        "female": [
            "Mary", "Patricia", "Jennifer", "Linda", "Elizabeth", "Barbara", "Susan",
            "Jessica", "Sarah", "Karen", "Nancy", "Lisa", "Betty", "Helen", "Sandra",
            "Donna", "Carol", "Ruth", "Sharon", "Michelle", "Laura", "Kimberly",
        ],
    },
    "es": {
        "male": [
            "Antonio", "Jose", "Manuel", "Francisco", "David", "Juan", "Javier", "Daniel",
            "Carlos", "Miguel", "Rafael", "Pedro", "Angel", "Alejandro", "Fernando",
        ],
        "female": [
            "Maria", "Carmen", "Ana", "Isabel", "Pilar", "Dolores", "Teresa", "Rosa",
            "Francisca", "Antonia", "Mercedes", "Esperanza", "Angela", "Josefa",
        ],
    },
    "de": {
        "male": [
            "Lukas", "Jonas", "Leon", "Felix", "Maximilian", "Paul", "Niklas", "Tim",
            "Jan", "Florian", "Tobias", "Stefan", "Thomas", "Matthias", "Sebastian",
        ],
        "female": [
            "Anna", "Lena", "Lea", "Hannah", "Laura", "Julia", "Sarah", "Katharina",
            "Sophie", "Marie", "Johanna", "Sabine", "Claudia", "Petra",
        ],
    },
    "it": {
        "male": [
            "Francesco", "Alessandro", "Lorenzo", "Matteo", "Andrea", "Gabriele", "Marco",
            "Luca", "Giuseppe", "Antonio", "Giovanni", "Roberto", "Stefano", "Davide",
        ],
        "female": [
            "Giulia", "Francesca", "Sofia", "Chiara", "Martina", "Alessia", "Sara",
            "Valentina", "Elena", "Federica", "Silvia", "Paola",
        ],
    },
    "fr": {
        "male": [
            "Lucas", "Hugo", "Louis", "Gabriel", "Arthur", "Nathan", "Thomas", "Antoine",
            "Nicolas", "Julien", "Mathieu", "Pierre", "Olivier", "Kylian",
        ],
        "female": [
            "Camille", "Léa", "Manon", "Chloé", "Emma", "Inès", "Julie", "Sarah",
            "Claire", "Margaux", "Amélie", "Céline",
        ],
    },
    "pt": {
        "male": [
            "João", "Pedro", "Lucas", "Gabriel", "Rafael", "Tiago", "Diogo", "Rodrigo",
            "Bruno", "André", "Ricardo", "Gonçalo", "Vinícius", "Thiago",
        ],
        "female": [
            "Ana", "Beatriz", "Mariana", "Inês", "Carolina", "Leonor", "Joana",
            "Larissa", "Camila", "Fernanda", "Juliana", "Rita",
        ],
    },
    "nl": {
        "male": [
            "Daan", "Sem", "Lucas", "Milan", "Levi", "Luuk", "Bram", "Thijs", "Jesse",
            "Ruud", "Frenkie", "Virgil", "Arjen", "Wesley",
        ],
        "female": [
            "Emma", "Julia", "Sophie", "Tess", "Sanne", "Lotte", "Fleur", "Anouk",
            "Femke", "Iris", "Noor", "Eva",
        ],
    },
}

_LAST_NAMES: Dict[str, List[str]] = {
    "en": [
        "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
        "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
        "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    ],
    "es": [
        "Garcia", "Rodriguez", "Lopez", "Martinez", "Gonzalez", "Hernandez", "Perez",
        "Sanchez", "Ramirez", "Cruz", "Flores", "Gomez", "Diaz", "Reyes",
    ],
    "de": [
        "Müller", "Schmidt", "Schneider", "Fischer", "Weber", "Meyer", "Wagner",
        "Becker", "Schulz", "Hoffmann", "Koch", "Richter", "Klein", "Wolf",
    ],
    "it": [
        "Rossi", "Russo", "Ferrari", "Esposito", "Bianchi", "Romano", "Colombo",
        "Ricci", "Marino", "Greco", "Bruno", "Gallo", "Conti", "De Luca",
    ],
    "fr": [
        "Martin", "Bernard", "Dubois", "Thomas", "Robert", "Richard", "Petit",
        "Durand", "Leroy", "Moreau", "Simon", "Laurent", "Lefebvre", "Michel",
    ],
    "pt": [
        "Silva", "Santos", "Ferreira", "Pereira", "Oliveira", "Costa", "Rodrigues",
        "Martins", "Sousa", "Fernandes", "Gonçalves", "Gomes", "Lopes", "Almeida",
    ],
    "nl": [
        "de Jong", "Jansen", "de Vries", "van den Berg", "van Dijk", "Bakker",
        "Janssen", "Visser", "Smit", "Meijer", "de Boer", "Mulder", "de Groot", "Bos",
    ],
}

_CITIES: Dict[str, List[str]] = {
    "GB": ["London", "Manchester", "Liverpool", "Birmingham", "Leeds", "Sheffield",
           "Bristol", "Newcastle", "Brighton", "Southampton"],
    "ES": ["Madrid", "Barcelona", "Sevilla", "Valencia", "Bilbao", "Málaga",
           "Zaragoza", "Las Palmas", "Granada", "Getafe"],
    "DE": ["Berlin", "München", "Hamburg", "Köln", "Frankfurt", "Stuttgart",
           "Düsseldorf", "Dortmund", "Essen", "Bremen"],
    "IT": ["Roma", "Milano", "Napoli", "Torino", "Palermo", "Genova",
           "Bologna", "Firenze", "Bari", "Catania"],
    "FR": ["Paris", "Marseille", "Lyon", "Toulouse", "Nice", "Nantes",
           "Montpellier", "Strasbourg", "Bordeaux", "Lille"],
    "BR": ["São Paulo", "Rio de Janeiro", "Salvador", "Brasília", "Fortaleza",
           "Belo Horizonte", "Manaus", "Curitiba", "Recife", "Porto Alegre"],
    "AR": ["Buenos Aires", "Córdoba", "Rosario", "Mendoza", "La Plata",
           "San Miguel", "Salta", "Santa Fe", "Mar del Plata", "San Juan"],
    "NL": ["Amsterdam", "Rotterdam", "Den Haag", "Utrecht", "Eindhoven",
           "Tilburg", "Groningen", "Almere", "Breda", "Nijmegen"],
    "PT": ["Lisboa", "Porto", "Vila Nova de Gaia", "Amadora", "Braga",
           "Setúbal", "Coimbra", "Funchal", "Almada", "Agualva-Cacém"],
    "US": ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix",
           "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose"],
}

_DEFAULT_CITIES = [
    "Capital City", "Port City", "Mountain View", "River City", "Central City",
    "East City", "West City", "North City", "South City", "Old Town",
]

FALLBACK_LANGUAGE = "en"


class NameRepository:
    """Lookups over the built-in name tables. Unknown keys fall back to English."""

    @staticmethod
    def get_first_names(language: str, gender: str = "male") -> List[str]:
        """
        First names for a language.

        Args:
            language: Two-letter language code
            gender: "male", "female" or "any"
        """
        names = _FIRST_NAMES.get(language.lower(), _FIRST_NAMES[FALLBACK_LANGUAGE])
        gender = gender.lower()
        if gender in ("male", "female"):
            return list(names[gender])
        return names["male"] + names["female"]

    @staticmethod
    def get_last_names(language: str) -> List[str]:
        return list(_LAST_NAMES.get(language.lower(), _LAST_NAMES[FALLBACK_LANGUAGE]))

    @staticmethod
    def get_city_names(country_code: str) -> List[str]:
        return list(_CITIES.get(country_code.upper(), _DEFAULT_CITIES))

    @staticmethod
    def supported_languages() -> List[str]:
        return sorted(_FIRST_NAMES)
