"""Fixed lookup tables behind semantic vectors and conceptual relatedness.

Nothing here is learned: the three primary clusters map to the x/y/z axes,
conceptual groups add partial offsets, and synonym groups only affect
edge strength.
"""

from tensegrity.models import ClusterName

# Primary clusters: membership adds +1 on the cluster's axis
SEMANTIC_CLUSTERS: dict[ClusterName, frozenset[str]] = {
    ClusterName.LANGUAGE: frozenset([
        "language", "linguistic", "syntax", "semantic", "grammar", "vocabulary",
        "word", "words", "text", "letter", "letters", "character", "characters",
        "symbol", "symbols", "sign", "signs", "meaning", "meanings",
        "communication", "expression", "discourse", "utterance", "phrase",
        "sentence", "paragraph", "narrative", "story", "dialogue", "speech",
        "writing", "written", "oral", "verbal", "lexical", "morphological",
        "phonetic", "phonological", "computational", "linguistics", "corpus",
        "tokenization", "parsing", "morphology", "tree", "trees", "parse",
        "grammars", "phonology",
    ]),
    ClusterName.SPACE: frozenset([
        "space", "spatial", "dimension", "dimensions", "distance", "area",
        "region", "zone", "field", "volume", "extent", "scope", "range",
        "boundary", "boundaries", "edge", "edges", "margin", "margins", "border",
        "borders", "territory", "territories", "domain", "domains", "realm",
        "realms", "expanse", "void", "voids", "vacuum", "terrain", "landscape",
        "topography", "geography", "location", "locations", "position",
        "positions", "place", "places", "site", "sites", "locale", "locales",
        "navigate", "navigation", "direction", "directions", "orientation",
        "coordinates", "mapping", "map", "maps", "vector", "vectors", "spaces",
        "computational", "topology", "topological", "graph", "graphs", "node",
        "nodes", "network", "networks", "mesh", "lattice", "grid",
    ]),
    ClusterName.LATENT: frozenset([
        "latent", "hidden", "embedded", "encoded", "implicit", "potential",
        "underlying", "submerged", "concealed", "invisible", "embedding",
        "embeddings", "vector", "vectors", "representation", "representations",
        "model", "models", "neural", "network", "networks", "machine",
        "learning", "ai", "artificial", "intelligence", "algorithm",
        "algorithms", "data", "dataset", "training", "trained", "technology",
        "tech", "technological", "computational", "digital", "binary", "code",
        "programming", "software", "hardware", "system", "systems",
        "architecture", "framework", "platform", "probability", "probabilities",
        "probabilistic", "statistical", "statistics", "distribution",
        "distributions", "frequency", "frequencies", "entropy", "information",
        "markov", "chain", "chains", "n-gram", "ngram", "ngrams", "token",
        "tokens", "tokenization", "corpus", "corpora",
    ]),
}

# Conceptual groups: thematic membership beyond the primary clusters
CONCEPTUAL_GROUPS: dict[str, frozenset[str]] = {
    "abstraction": frozenset([
        "concept", "idea", "notion", "theory", "principle", "abstract",
        "theoretical", "philosophical", "metaphysical", "meaning",
        "significance", "essence", "nature", "being", "existence",
    ]),
    "physics": frozenset([
        "physics", "physical", "force", "forces", "energy", "motion", "movement",
        "dynamics", "kinetic", "momentum", "velocity", "acceleration", "gravity",
        "mass", "particle", "particles", "wave", "waves", "field", "fields",
        "quantum", "electromagnetic", "interaction", "interactions", "law",
        "laws", "equation", "equations", "formula", "formulas",
    ]),
    "computational_linguistics": frozenset([
        "computational", "linguistics", "linguistic", "corpus", "corpora",
        "tokenization", "tokenize", "parsing", "parse", "parser", "syntax",
        "tree", "trees", "grammar", "morphology", "morphological", "lexical",
        "semantic", "analysis", "nlp", "natural", "language", "processing",
        "tagging", "pos", "part", "speech", "chunking", "dependency",
        "constituency",
    ]),
    "computation": frozenset([
        "computation", "computational", "compute", "computing", "algorithm",
        "algorithms", "process", "processing", "execute", "execution",
        "calculate", "calculation", "space", "topology", "topological", "graph",
        "graphs", "node", "nodes", "edge", "edges", "network", "networks",
        "mesh", "lattice", "grid", "matrix", "vector", "vectors", "dimension",
        "dimensions", "coordinate", "coordinates", "mapping", "map",
    ]),
    "probability": frozenset([
        "probability", "probabilities", "probabilistic", "statistical",
        "statistics", "distribution", "distributions", "frequency",
        "frequencies", "entropy", "information", "theory", "markov", "chain",
        "chains", "n-gram", "ngram", "ngrams", "bigram", "trigram", "unigram",
        "likelihood", "conditional", "bayesian", "prior", "posterior",
        "expectation", "variance", "standard", "deviation", "mean", "median",
        "mode",
    ]),
    "structure": frozenset([
        "structure", "form", "pattern", "organization", "arrangement",
        "framework", "architecture", "system", "network", "grid", "matrix",
        "lattice", "hierarchy", "order",
    ]),
    "network": frozenset([
        "network", "networks", "graph", "graphs", "node", "nodes", "edge",
        "edges", "connection", "connections", "link", "links", "topology",
        "topological", "mesh", "web", "lattice", "grid", "structure", "system",
        "architecture",
    ]),
    "transformation": frozenset([
        "transform", "change", "shift", "evolve", "develop", "emerge", "become",
        "transition", "convert", "translate", "encode", "decode", "process",
    ]),
    "connection": frozenset([
        "connect", "link", "relate", "associate", "bind", "join", "unite",
        "merge", "combine", "integrate", "bridge", "relationship", "connection",
        "relation",
    ]),
    "perception": frozenset([
        "perceive", "see", "observe", "understand", "comprehend", "grasp",
        "recognize", "interpret", "read", "decode", "visualize", "imagine",
    ]),
    "generation": frozenset([
        "generate", "create", "produce", "form", "make", "build", "construct",
        "compose", "synthesize", "emerge", "arise", "manifest",
    ]),
}

# Offsets (x, y, z) a conceptual group adds to a member word's vector
GROUP_RECIPES: dict[str, tuple[float, float, float]] = {
    "abstraction": (0.3, 0.0, 0.2),
    "physics": (0.1, 0.3, 0.3),
    "structure": (0.0, 0.3, 0.2),
    "transformation": (0.1, 0.0, 0.4),
    "connection": (0.0, 0.2, 0.3),
    "perception": (0.3, 0.0, 0.2),
    "generation": (0.1, 0.0, 0.4),
    "computational_linguistics": (0.4, 0.1, 0.3),
    "probability": (0.3, 0.1, 0.4),
    "computation": (0.2, 0.4, 0.3),
    "network": (0.1, 0.3, 0.4),
}

# Weight a conceptual group counts for when normalizing
GROUP_WEIGHT = 0.5

# Pairs of groups whose members are related across group boundaries
CROSS_REINFORCING_GROUPS: frozenset[frozenset[str]] = frozenset([
    frozenset(["abstraction", "physics"]),
    frozenset(["computational_linguistics", "probability"]),
])

# Synonym groups: the key and its members are all mutually related
CONCEPTUAL_SYNONYMS: dict[str, frozenset[str]] = {
    "language": frozenset(["text", "word", "meaning", "communication", "expression", "discourse"]),
    "space": frozenset([
        "dimension", "vector", "coordinate", "topology", "graph", "network", "node",
        "edge", "computational",
    ]),
    "latent": frozenset(["hidden", "embedded", "implicit", "potential", "underlying"]),
    "representation": frozenset(["model", "form", "structure", "pattern", "image"]),
    "network": frozenset([
        "graph", "topology", "node", "edge", "space", "dimension", "vector",
        "computational", "structure",
    ]),
    "meaning": frozenset(["significance", "sense", "interpretation", "understanding"]),
    "dimension": frozenset(["space", "extent", "scope", "range", "scale"]),
    "vector": frozenset(["direction", "path", "trajectory", "course"]),
    "embedding": frozenset(["encoding", "representation", "mapping", "translation"]),
    "abstraction": frozenset(["concept", "idea", "theory", "principle", "abstract", "theoretical"]),
    "physics": frozenset([
        "force", "energy", "motion", "dynamics", "field", "interaction", "law", "equation",
    ]),
    "theory": frozenset(["principle", "law", "concept", "abstraction", "model", "framework"]),
    "computational_linguistics": frozenset([
        "nlp", "parsing", "tokenization", "corpus", "syntax", "grammar", "morphology",
        "semantic", "analysis",
    ]),
    "probability": frozenset([
        "statistical", "distribution", "frequency", "entropy", "markov", "n-gram",
        "likelihood", "bayesian",
    ]),
    "parsing": frozenset(["parse", "syntax", "tree", "grammar", "structure"]),
    "tokenization": frozenset(["token", "tokens", "corpus", "text", "processing"]),
    "probability_distribution": frozenset([
        "distribution", "frequency", "statistical", "likelihood", "probability",
    ]),
    "computation": frozenset([
        "compute", "algorithm", "process", "calculate", "execute", "space", "topology",
        "graph", "network", "node", "edge",
    ]),
    "computational_space": frozenset([
        "computation", "space", "topology", "graph", "network", "dimension", "vector",
        "coordinate",
    ]),
    "network_space": frozenset([
        "network", "space", "graph", "topology", "node", "edge", "dimension", "vector",
        "coordinate",
    ]),
}


def conceptual_groups_of(word: str) -> list[str]:
    """Names of every conceptual group containing word, in table order."""
    return [name for name, members in CONCEPTUAL_GROUPS.items() if word in members]


def synonym_groups_of(word: str) -> set[str]:
    """Keys of every synonym group word belongs to (as key or member)."""
    return {
        key for key, members in CONCEPTUAL_SYNONYMS.items()
        if word == key or word in members
    }
