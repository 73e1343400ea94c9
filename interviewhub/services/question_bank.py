# interviewhub/services/question_bank.py
# Fixed multiple-choice question blocks for mock interviews.
# Skill blocks are keyed by the normalized keywords that select them.
from typing import Dict, List, Optional, Tuple

Question = Dict[str, object]


def _q(question: str, options: List[str], correct: str, explanation: str) -> Question:
    return {
        "question": question,
        "options": options,
        "correctAnswer": correct,
        "explanation": explanation,
    }


DEFAULT_QUESTIONS: List[Question] = [
    _q(
        "What is a closure in JavaScript?",
        [
            "A function that has access to variables in its outer scope",
            "A method to close browser windows",
            "A way to protect code from external access",
            "A design pattern for asynchronous code",
        ],
        "A function that has access to variables in its outer scope",
        "A closure is a function that has access to variables in its parent scope, even after the parent function has closed.",
    ),
    _q(
        "What is the difference between let and var in JavaScript?",
        [
            "var is block-scoped, let is function-scoped",
            "let is block-scoped, var is function-scoped",
            "They are identical in modern JavaScript",
            "var cannot be reassigned, let can be",
        ],
        "let is block-scoped, var is function-scoped",
        "Variables declared with let are block-scoped, meaning they're only accessible within the block they're defined in. Variables declared with var are function-scoped.",
    ),
]

REACT_QUESTIONS: List[Question] = [
    _q(
        "What is the purpose of React's useEffect hook?",
        [
            "To fetch data from APIs only",
            "To perform side effects in function components",
            "To create new state variables",
            "To replace class components entirely",
        ],
        "To perform side effects in function components",
        "useEffect is used to perform side effects in function components. Side effects can include data fetching, DOM manipulation, setting up subscriptions, and more.",
    ),
    _q(
        "In React, what is the purpose of keys when rendering lists?",
        [
            "Keys are optional and only improve performance",
            "Keys help React identify which items have changed, been added, or removed",
            "Keys are required for all elements, not just lists",
            "Keys replace the need for state management",
        ],
        "Keys help React identify which items have changed, been added, or removed",
        "Keys give elements a stable identity and help React identify which items have changed, been added, or removed. They should be unique among siblings in a list.",
    ),
    _q(
        "What is the difference between state and props in React?",
        [
            "State is immutable, props are mutable",
            "Props are for functional components, state is for class components",
            "State is managed within the component, props are passed from parent components",
            "Props are private, state is public",
        ],
        "State is managed within the component, props are passed from parent components",
        "State is managed within a component and can be updated with setState (or state updater functions in hooks). Props are passed down from parent components and are read-only within the component that receives them.",
    ),
    _q(
        "What is React's Virtual DOM?",
        [
            "A browser feature that React uses for faster rendering",
            "A lightweight copy of the real DOM that React uses for performance optimization",
            "A database that stores component state",
            "A component that virtualizes list rendering",
        ],
        "A lightweight copy of the real DOM that React uses for performance optimization",
        "The Virtual DOM is a lightweight JavaScript representation of the real DOM. React uses it to compare changes before updating the actual DOM, which improves performance by minimizing expensive DOM operations.",
    ),
    _q(
        "What is the purpose of React Context?",
        [
            "To store global CSS variables",
            "To bypass the single-direction data flow and avoid prop drilling",
            "To connect React to backend services",
            "To store component-level state",
        ],
        "To bypass the single-direction data flow and avoid prop drilling",
        "React Context provides a way to share values between components without explicitly passing props through every level of the component tree, avoiding the problem known as 'prop drilling'.",
    ),
]

PYTHON_QUESTIONS: List[Question] = [
    _q(
        "What is a Python generator?",
        [
            "A type of function that returns multiple values using the yield keyword",
            "A class that generates random numbers",
            "A tool that automatically generates Python code",
            "A module for creating Python packages",
        ],
        "A type of function that returns multiple values using the yield keyword",
        "A generator is a special type of function that returns an iterator. It uses the yield keyword instead of return and can pause and resume its execution state.",
    ),
    _q(
        "What does the __init__ method do in Python?",
        [
            "Initializes a module when imported",
            "Initializes a class instance and sets initial attributes",
            "Initializes the Python interpreter",
            "Creates a constructor function",
        ],
        "Initializes a class instance and sets initial attributes",
        "The __init__ method is a special method (constructor) in Python classes that is automatically called when a new instance of a class is created. It's used to initialize the object's attributes.",
    ),
    _q(
        "What is the difference between a list and a tuple in Python?",
        [
            "Lists are ordered, tuples are not",
            "Tuples are immutable, lists are mutable",
            "Lists can only contain numbers, tuples can contain any data type",
            "Tuples are faster than lists for all operations",
        ],
        "Tuples are immutable, lists are mutable",
        "The main difference is that lists are mutable (can be changed after creation) while tuples are immutable (cannot be modified after creation). Both are ordered collections that can hold mixed data types.",
    ),
    _q(
        "What are Python decorators?",
        [
            "Functions that add layout elements to a GUI",
            "Design patterns for object-oriented programming",
            "Functions that take another function as an argument and extend its behavior",
            "Special comments that document code automatically",
        ],
        "Functions that take another function as an argument and extend its behavior",
        "Decorators allow you to modify or extend the behavior of functions or methods without changing their source code. They are implemented as functions that take another function as an argument and return a new function.",
    ),
    _q(
        "What is a context manager in Python?",
        [
            "A tool for managing memory allocation",
            "A feature that allows specific execution contexts for functions",
            "A protocol for resource management using with statements",
            "A type of global variable scope",
        ],
        "A protocol for resource management using with statements",
        "Context managers implement __enter__ and __exit__ and are used with the 'with' statement to handle resource allocation and cleanup, e.g. files that are closed automatically when the block exits.",
    ),
]

SQL_QUESTIONS: List[Question] = [
    _q(
        "What is the difference between INNER JOIN and LEFT JOIN in SQL?",
        [
            "There is no difference; they are synonyms",
            "INNER JOIN returns matching rows, LEFT JOIN returns all rows from the left table plus matching rows from the right table",
            "INNER JOIN is faster than LEFT JOIN",
            "LEFT JOIN can only be used with primary keys",
        ],
        "INNER JOIN returns matching rows, LEFT JOIN returns all rows from the left table plus matching rows from the right table",
        "INNER JOIN returns only rows that have matching values in both tables. LEFT JOIN returns all rows from the left table and matching rows from the right table, with NULLs where there is no match.",
    ),
    _q(
        "What is database normalization?",
        [
            "The process of optimizing database queries",
            "Converting a database to a different SQL dialect",
            "Organizing data to reduce redundancy and improve data integrity",
            "Compressing database tables to save storage space",
        ],
        "Organizing data to reduce redundancy and improve data integrity",
        "Normalization organizes data into tables and relationships so that redundancy and inconsistent dependencies are eliminated.",
    ),
    _q(
        "What is the purpose of an index in a database?",
        [
            "To create foreign key relationships",
            "To speed up data retrieval operations on a table",
            "To enforce data integrity constraints",
            "To track changes to the database over time",
        ],
        "To speed up data retrieval operations on a table",
        "An index is a data structure that speeds up reads on a table at the cost of additional writes and storage space.",
    ),
    _q(
        "What is the difference between SQL's HAVING and WHERE clauses?",
        [
            "HAVING can only be used with string columns, WHERE with numeric columns",
            "WHERE filters individual rows before grouping, HAVING filters groups after GROUP BY",
            "HAVING is used for simple conditions, WHERE for complex ones",
            "There is no difference; they are interchangeable",
        ],
        "WHERE filters individual rows before grouping, HAVING filters groups after GROUP BY",
        "WHERE filters rows before GROUP BY; HAVING filters groups afterwards and can use aggregate functions like COUNT or SUM.",
    ),
    _q(
        "What is a transaction in a database?",
        [
            "A record of user access to the database",
            "A unit of work that is performed against a database and treated as a single logical operation",
            "A connection between two database tables",
            "A query that retrieves data from multiple tables",
        ],
        "A unit of work that is performed against a database and treated as a single logical operation",
        "A transaction is a sequence of operations performed as one logical unit of work, with the ACID properties: atomicity, consistency, isolation and durability.",
    ),
]

JAVA_QUESTIONS: List[Question] = [
    _q(
        "What is the difference between an interface and an abstract class in Java?",
        [
            "Interfaces can have method implementations, abstract classes cannot",
            "Abstract classes can have method implementations and state, interfaces traditionally only define method signatures",
            "Interfaces cannot be instantiated, abstract classes can",
            "Abstract classes support multiple inheritance, interfaces don't",
        ],
        "Abstract classes can have method implementations and state, interfaces traditionally only define method signatures",
        "Abstract classes can mix abstract and concrete methods and hold instance state. Interfaces traditionally only declare method signatures, although newer Java versions allow default and static methods.",
    ),
    _q(
        "What is the purpose of the 'final' keyword in Java?",
        [
            "It's used only for optimization hints to the compiler",
            "It marks a variable that will be initialized at runtime",
            "It indicates that a variable, method, or class cannot be changed/overridden",
            "It forces garbage collection on an object when it goes out of scope",
        ],
        "It indicates that a variable, method, or class cannot be changed/overridden",
        "final variables can't be reassigned, final methods can't be overridden, and final classes can't be extended.",
    ),
    _q(
        "What is the difference between '==' and '.equals()' in Java?",
        [
            "They are identical and can be used interchangeably",
            "'==' compares memory references, '.equals()' typically compares contents",
            "'==' is for primitive types, '.equals()' doesn't work with primitive types",
            "'.equals()' is faster than '=='",
        ],
        "'==' compares memory references, '.equals()' typically compares contents",
        "'==' checks whether two references point to the same object. '.equals()', when overridden, compares the contents of the objects.",
    ),
    _q(
        "What is the Java Collections Framework?",
        [
            "A library for collecting and organizing program dependencies",
            "A set of classes and interfaces that implement commonly reusable data structures",
            "A framework for connecting to various databases",
            "A utility for gathering garbage collection statistics",
        ],
        "A set of classes and interfaces that implement commonly reusable data structures",
        "The Collections Framework provides interfaces like List, Set and Map, implementations like ArrayList, HashSet and HashMap, and algorithms for searching and sorting.",
    ),
    _q(
        "What is the purpose of Java's Exception Handling mechanism?",
        [
            "To prevent runtime errors from occurring",
            "To catch and handle unexpected conditions during program execution",
            "To make code faster by avoiding error checking",
            "To report errors to the Java Virtual Machine",
        ],
        "To catch and handle unexpected conditions during program execution",
        "Exception handling deals with runtime errors in a controlled fashion and separates normal code from error-handling code via try/catch/finally and throw/throws.",
    ),
]

DEVOPS_QUESTIONS: List[Question] = [
    _q(
        "What is containerization in DevOps?",
        [
            "Running applications in a virtual machine",
            "Packaging code and dependencies together for consistent deployment",
            "Storing data in secure containers",
            "A security measure to isolate sensitive data",
        ],
        "Packaging code and dependencies together for consistent deployment",
        "Containerization packages an application with its dependencies, configuration and environment so it runs the same way on any infrastructure.",
    ),
    _q(
        "What is the difference between Docker and Kubernetes?",
        [
            "They are competitors offering the same functionality",
            "Docker is a containerization platform, Kubernetes is a container orchestration system",
            "Docker is for Windows containers, Kubernetes is for Linux containers",
            "Docker is open-source, Kubernetes is proprietary",
        ],
        "Docker is a containerization platform, Kubernetes is a container orchestration system",
        "Docker creates and runs containers. Kubernetes automates deployment, scaling and management of containerized applications.",
    ),
    _q(
        "What is Continuous Integration/Continuous Deployment (CI/CD)?",
        [
            "A software development approach where code is continuously written without breaks",
            "A practice of merging code changes frequently and automating the delivery process",
            "A type of Agile methodology focused on continuous client feedback",
            "A programming paradigm that emphasizes continuously changing requirements",
        ],
        "A practice of merging code changes frequently and automating the delivery process",
        "CI merges changes frequently into a shared repository where automated builds and tests run; CD automatically deploys changes that pass.",
    ),
    _q(
        "What is Infrastructure as Code (IaC)?",
        [
            "Writing code that directly modifies physical hardware",
            "Managing and provisioning infrastructure through code instead of manual processes",
            "A programming language specifically designed for infrastructure management",
            "Coding practices for infrastructure teams",
        ],
        "Managing and provisioning infrastructure through code instead of manual processes",
        "IaC manages and provisions infrastructure through machine-readable definition files. Terraform, CloudFormation and Ansible are examples.",
    ),
    _q(
        "What is the principle of 'immutable infrastructure' in DevOps?",
        [
            "Infrastructure that cannot be physically accessed for security reasons",
            "Systems that never require updates or patches",
            "Infrastructure components that are never modified after deployment but replaced entirely",
            "Using only proprietary software that cannot be modified",
        ],
        "Infrastructure components that are never modified after deployment but replaced entirely",
        "Deployed servers are never modified; a change means building a new server from a common image, which removes configuration drift.",
    ),
]

JAVASCRIPT_QUESTIONS: List[Question] = [
    _q(
        "What is event bubbling in JavaScript?",
        [
            "A technique to optimize event handling",
            "When an event triggers on an element and propagates up to parent elements",
            "A method to create multiple events simultaneously",
            "A way to prevent default browser behavior",
        ],
        "When an event triggers on an element and propagates up to parent elements",
        "Event bubbling is a mechanism where an event triggered on the innermost element bubbles up through its ancestors in the DOM tree until it reaches the outermost ancestor or is explicitly stopped.",
    ),
    _q(
        "What is the purpose of JavaScript Promises?",
        [
            "To guarantee code performance",
            "To represent a future value and handle asynchronous operations",
            "To secure JavaScript code from being modified",
            "To enforce contractual agreements in code",
        ],
        "To represent a future value and handle asynchronous operations",
        "Promises represent the eventual completion or failure of an asynchronous operation and allow chaining with .then() and .catch() instead of nested callbacks.",
    ),
    _q(
        "What is the JavaScript 'this' keyword?",
        [
            "A keyword that always refers to the global object",
            "A reference to the previous function in the call stack",
            "A reference to the object that is executing the current function",
            "A keyword used only in class definitions",
        ],
        "A reference to the object that is executing the current function",
        "The value of 'this' depends on how a function is called: the owning object for a method, the global object (or undefined in strict mode) for a plain call, the element for an event handler.",
    ),
    _q(
        "What is the difference between '==' and '===' operators in JavaScript?",
        [
            "They are identical in modern JavaScript",
            "'===' checks both value and type, '==' checks only value",
            "'==' is for strings, '===' is for numbers",
            "'===' is deprecated in ES6+",
        ],
        "'===' checks both value and type, '==' checks only value",
        "'===' compares value and type without conversion; '==' coerces the operands to a common type before comparing.",
    ),
    _q(
        "What is a JavaScript closure?",
        [
            "A way to close browser windows using JavaScript",
            "A function that has access to variables from its outer lexical scope even after that scope has closed",
            "A method to terminate running JavaScript code",
            "A technique for hiding HTML elements",
        ],
        "A function that has access to variables from its outer lexical scope even after that scope has closed",
        "A closure is a function together with the lexical environment it was declared in, so it keeps access to its parent's variables after the parent has returned.",
    ),
]

# (keywords, block). A profile matching any keyword of a row gets the whole block.
SKILL_BLOCKS: List[Tuple[Tuple[str, ...], List[Question]]] = [
    (("react",), REACT_QUESTIONS),
    (("python",), PYTHON_QUESTIONS),
    (("sql", "database"), SQL_QUESTIONS),
    (("java",), JAVA_QUESTIONS),
    (("devops", "aws", "cloud"), DEVOPS_QUESTIONS),
    (("javascript", "js"), JAVASCRIPT_QUESTIONS),
]

# extra question appended when the category argument matches (case-insensitive)
CATEGORY_EXTRAS: Dict[str, List[Question]] = {
    "javascript": [JAVASCRIPT_QUESTIONS[0]],
}


def normalize_skills(skills: Optional[List[str]]) -> List[str]:
    return [s.strip().lower() for s in skills or []]


def questions_for_skills(skills: Optional[List[str]]) -> List[Question]:
    """Skill blocks are additive and independent per category, in table order."""
    normalized = set(normalize_skills(skills))
    pool: List[Question] = []
    for keywords, block in SKILL_BLOCKS:
        if normalized.intersection(keywords):
            pool.extend(block)
    return pool


def questions_for_category(category: Optional[str]) -> List[Question]:
    if not category:
        return []
    return list(CATEGORY_EXTRAS.get(category.strip().lower(), []))
