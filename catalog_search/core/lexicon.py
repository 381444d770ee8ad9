"""Static lexical knowledge used to widen matching beyond literal substrings."""

from typing import Dict, List, Tuple

# Acronym -> expansions
ABBREVIATIONS: Dict[str, List[str]] = {
    # Search algorithms
    "dfs": ["depth first search", "depth-first"],
    "bfs": ["breadth first search", "breadth-first"],
    "ucs": ["uniform cost search"],
    "iddfs": ["iterative deepening depth first search"],
    # Tree structures
    "bst": ["binary search tree"],
    "avl": ["adelson velsky landis"],
    "rbt": ["red black tree"],
    "bt": ["binary tree"],
    # Graph algorithms
    "mst": ["minimum spanning tree"],
    "scc": ["strongly connected components"],
    "dag": ["directed acyclic graph"],
    # String algorithms
    "lcs": ["longest common subsequence"],
    "lis": ["longest increasing subsequence"],
    "kmp": ["knuth morris pratt"],
    # Dynamic programming
    "dp": ["dynamic programming"],
    "memo": ["memoization"],
    # Other paradigms
    "bf": ["brute force", "bellman ford"],
    "dc": ["divide and conquer"],
    "greedy": ["greedy algorithm"],
    # Data structures
    "ll": ["linked list"],
    "dll": ["doubly linked list"],
    "heap": ["heap", "priority queue"],
    "stack": ["stack", "lifo"],
    "queue": ["queue", "fifo"],
    # Cache policies
    "lru": ["least recently used"],
    "lfu": ["least frequently used"],
    "fifo": ["first in first out"],
    "lifo": ["last in first out"],
    # Complexity notation
    "big o": ["time complexity", "space complexity"],
    "o(1)": ["constant time"],
    "o(n)": ["linear time"],
    "o(log n)": ["logarithmic time"],
    "o(n log n)": ["linearithmic time"],
    "o(n²)": ["quadratic time", "o(n^2)"],
    # System terms
    "api": ["application programming interface"],
    "ui": ["user interface"],
    "db": ["database"],
    "os": ["operating system"],
    "fs": ["file system"],
    "gc": ["garbage collection"],
    "jit": ["just in time"],
    "cpu": ["central processing unit"],
    "gpu": ["graphics processing unit"],
    "ram": ["random access memory"],
    "ssd": ["solid state drive"],
    "hdd": ["hard disk drive"],
    "url": ["uniform resource locator"],
    "http": ["hypertext transfer protocol"],
    "tcp": ["transmission control protocol"],
    "udp": ["user datagram protocol"],
    "ip": ["internet protocol"],
    "dns": ["domain name system"],
}

SYNONYMS: Dict[str, List[str]] = {
    # Actions
    "find": ["search", "locate", "discover", "seek", "lookup"],
    "search": ["find", "lookup", "seek", "hunt", "explore"],
    "sort": ["order", "arrange", "organize", "rank", "sequence"],
    "order": ["sort", "arrange", "sequence", "rank"],
    "traverse": ["visit", "walk", "iterate", "explore", "navigate"],
    "insert": ["add", "include", "append", "place", "put"],
    "remove": ["delete", "eliminate", "erase", "extract", "take out"],
    "update": ["modify", "change", "alter", "edit", "revise"],
    "compare": ["contrast", "match", "check", "evaluate", "assess"],
    # Performance
    "fast": ["quick", "rapid", "speedy", "efficient", "swift", "optimal"],
    "slow": ["sluggish", "inefficient", "poor", "suboptimal", "bad"],
    "optimal": ["best", "ideal", "perfect", "efficient", "maximum"],
    "efficient": ["fast", "optimal", "good", "effective", "streamlined"],
    # Size
    "big": ["large", "huge", "massive", "enormous", "giant"],
    "small": ["tiny", "little", "minimal", "compact", "micro"],
    # Quality
    "best": ["optimal", "ideal", "perfect", "excellent", "top"],
    "worst": ["poor", "bad", "terrible", "awful", "suboptimal"],
    "good": ["excellent", "great", "fine", "solid", "decent"],
    "bad": ["poor", "terrible", "awful", "suboptimal", "inefficient"],
    # Difficulty
    "simple": ["easy", "basic", "elementary", "straightforward", "trivial"],
    "complex": ["complicated", "difficult", "hard", "intricate", "sophisticated"],
    "easy": ["simple", "basic", "straightforward", "trivial", "elementary"],
    "hard": ["difficult", "complex", "challenging", "tough", "intricate"],
    # Structure
    "path": ["route", "way", "connection", "link", "trail"],
    "distance": ["length", "cost", "weight", "span", "measure"],
    "connect": ["link", "join", "attach", "bind", "associate"],
    "node": ["vertex", "element", "item", "point"],
    "edge": ["connection", "link", "arc", "branch"],
    # Algorithm properties
    "stable": ["consistent", "reliable", "predictable"],
    "unstable": ["inconsistent", "unreliable", "unpredictable"],
    "recursive": ["self-calling", "iterative approach"],
    "iterative": ["looping", "repetitive", "cyclical"],
    # Data structures
    "array": ["list", "collection", "sequence", "vector"],
    "list": ["array", "sequence", "collection"],
    "tree": ["hierarchy", "structure", "branching"],
    "graph": ["network", "connections", "relationships"],
    "stack": ["pile", "lifo", "last in first out"],
    "queue": ["line", "fifo", "first in first out"],
    "heap": ["priority queue", "binary heap"],
}

# Domain term -> vocabulary that items about that term tend to use
JARGON: Dict[str, List[str]] = {
    # Performance
    "fast": ["quick", "merge", "heap", "radix", "binary", "hash", "logarithmic", "efficient"],
    "slow": ["bubble", "selection", "insertion", "linear", "sequential", "brute force"],
    "efficient": ["binary", "quick", "merge", "heap", "hash", "optimal", "logarithmic"],
    "inefficient": ["bubble", "selection", "linear", "brute force", "exponential"],
    "optimal": ["binary", "merge", "dijkstra", "a star", "efficient"],
    # Stability
    "stable": ["merge", "bubble", "insertion", "counting", "preserves order"],
    "unstable": ["quick", "heap", "selection", "does not preserve"],
    # Space
    "inplace": ["quick", "heap", "bubble", "selection", "insertion", "constant space"],
    "extra": ["merge", "counting", "radix", "requires additional"],
    "memory": ["merge", "counting", "radix", "space complexity"],
    "constant space": ["inplace", "no extra memory", "o(1) space"],
    # Paradigms
    "divide": ["quick", "merge", "binary", "divide and conquer"],
    "conquer": ["quick", "merge", "binary", "divide and conquer"],
    "recursive": ["merge", "quick", "binary", "dfs", "fibonacci", "self calling"],
    "iterative": ["bubble", "selection", "insertion", "bfs", "loops"],
    "greedy": ["dijkstra", "prim", "kruskal", "huffman", "local optimal"],
    "dynamic": ["longest common subsequence", "knapsack", "fibonacci", "memoization"],
    "backtrack": ["n queens", "sudoku", "maze", "trial and error"],
    # Search
    "breadth first": ["bfs", "level order", "queue based", "layer by layer"],
    "depth first": ["dfs", "stack based", "go deep", "recursive"],
    "best first": ["a star", "dijkstra", "heuristic", "priority"],
    "binary search": ["logarithmic", "sorted array", "divide and conquer"],
    # Graphs
    "shortest path": ["dijkstra", "bellman ford", "floyd warshall", "a star"],
    "minimum spanning tree": ["prim", "kruskal", "mst", "connects all"],
    "strongly connected": ["tarjan", "kosaraju", "scc", "bidirectional"],
    "topological sort": ["dfs", "bfs", "dependency", "ordering"],
    "cycle": ["floyd", "dfs", "union find", "loop detection"],
    # Trees
    "balanced": ["avl", "red black", "height balanced", "logarithmic"],
    "binary tree": ["bst", "traversal", "inorder", "preorder", "postorder"],
    "traversal": ["inorder", "preorder", "postorder", "level order", "dfs", "bfs"],
    # Complexity
    "time complexity": ["big o", "runtime", "performance", "efficiency"],
    "space complexity": ["memory", "storage", "auxiliary space"],
    "constant time": ["o(1)", "immediate", "fixed time"],
    "linear time": ["o(n)", "proportional", "sequential"],
    "logarithmic": ["o(log n)", "binary search", "tree height"],
    "quadratic": ["o(n²)", "nested loops", "bubble sort"],
    "exponential": ["o(2^n)", "brute force", "very slow"],
    # Data structures
    "array": ["list", "vector", "sequence", "indexed"],
    "linked list": ["nodes", "pointers", "dynamic", "sequential access"],
    "stack": ["lifo", "last in first out", "push", "pop"],
    "queue": ["fifo", "first in first out", "enqueue", "dequeue"],
    "heap": ["priority queue", "binary heap", "max heap", "min heap"],
    "hash table": ["dictionary", "map", "key value", "constant lookup"],
    "tree": ["hierarchy", "nodes", "edges", "root", "leaf"],
    "graph": ["vertices", "edges", "network", "connections"],
    # Approach
    "sequential": ["linear", "brute force"],
    "binary": ["binary search", "binary tree"],
    "hash": ["hash table", "hash map"],
    # Sorting
    "comparison": ["bubble", "selection", "insertion", "merge", "quick", "heap"],
    "non-comparison": ["counting", "radix", "bucket"],
    "adaptive": ["insertion", "bubble"],
    # Problem types
    "optimization": ["dijkstra", "dynamic programming", "greedy"],
    "search": ["linear", "binary", "dfs", "bfs"],
    "sort": ["bubble", "selection", "insertion", "merge", "quick", "heap"],
    "matrix": ["floyd", "matrix multiplication"],
    "string": ["pattern matching", "edit distance", "longest common subsequence"],
}

CONCEPT_PAIRS: List[Tuple[str, str]] = [
    ("sort", "order"),
    ("search", "find"),
    ("tree", "node"),
    ("graph", "vertex"),
    ("hash", "map"),
    ("queue", "stack"),
    ("recursive", "iteration"),
    ("optimal", "efficient"),
]

# Curated entry points offered when there is little query history
CATEGORY_QUERIES: List[str] = [
    "sorting algorithms",
    "graph algorithms",
    "search algorithms",
    "dynamic programming",
    "greedy algorithms",
    "divide and conquer",
    "tree traversal",
    "shortest path",
    "minimum spanning tree",
]
