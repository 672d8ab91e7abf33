"""Demo catalogue inserted into an empty database."""

from datetime import date

SAMPLE_PROGRAMS = [
    {
        "id": 1,
        "nom": "Développement Web",
        "description": "Formation complète en développement web moderne",
        "objectifs": "Maîtriser les technologies web actuelles",
        "programme": "HTML, CSS, JavaScript, React, Node.js",
        "modalites": "Présentiel et distanciel",
        "accessibilite": "Formation accessible aux personnes en situation de handicap",
        "image": "https://images.pexels.com/photos/11035380/pexels-photo-11035380.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
    {
        "id": 2,
        "nom": "Data Science",
        "description": "Formation en science des données et intelligence artificielle",
        "objectifs": "Analyser et interpréter les données",
        "programme": "Python, SQL, Machine Learning, Statistics",
        "modalites": "Présentiel",
        "accessibilite": "Formation accessible aux personnes en situation de handicap",
        "image": "https://images.pexels.com/photos/8386440/pexels-photo-8386440.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
    {
        "id": 3,
        "nom": "Cybersécurité",
        "description": "Formation en sécurité informatique",
        "objectifs": "Protéger les systèmes informatiques",
        "programme": "Réseaux, Cryptographie, Ethical Hacking",
        "modalites": "Présentiel",
        "accessibilite": "Formation accessible aux personnes en situation de handicap",
        "image": "https://images.pexels.com/photos/60504/security-protection-anti-virus-software-60504.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
]

SAMPLE_STAFF = [
    {
        "id": 1,
        "nom": "Martin",
        "prenom": "Jean",
        "email": "j.martin@ecole.fr",
        "role": "Formateur",
        "experience": "10 ans d'expérience en développement",
        "certifications": "Certifié AWS Solutions Architect",
    },
    {
        "id": 2,
        "nom": "Dubois",
        "prenom": "Marie",
        "email": "m.dubois@ecole.fr",
        "role": "Formatrice",
        "experience": "8 ans d'expérience en data science",
        "certifications": "Certifiée Google Cloud Professional",
    },
    {
        "id": 3,
        "nom": "Leroy",
        "prenom": "Pierre",
        "email": "p.leroy@ecole.fr",
        "role": "Formateur",
        "experience": "12 ans d'expérience en cybersécurité",
        "certifications": "Certifié CISSP",
    },
]


def _web_question(question, correct, *wrong):
    return {
        "filiere_id": 1,
        "question": question,
        "bonne_reponse": correct,
        "mauvaise1": wrong[0],
        "mauvaise2": wrong[1],
        "mauvaise3": wrong[2],
    }


SAMPLE_QUESTIONS = [
    _web_question(
        "Quel est le langage principal pour le développement frontend ?",
        "JavaScript", "Python", "Java", "C++",
    ),
    _web_question(
        "Que signifie HTML ?",
        "HyperText Markup Language",
        "High Tech Modern Language",
        "Home Tool Markup Language",
        "Hyperlink Text Management Language",
    ),
    _web_question(
        "Quel framework est populaire pour React ?",
        "Next.js", "Django", "Laravel", "Spring",
    ),
    _web_question(
        "Que signifie CSS ?",
        "Cascading Style Sheets",
        "Computer Style Sheets",
        "Creative Style Sheets",
        "Colorful Style Sheets",
    ),
    _web_question(
        "Quel est le port par défaut pour HTTP ?",
        "80", "443", "8080", "3000",
    ),
    _web_question(
        "Que signifie API ?",
        "Application Programming Interface",
        "Automated Programming Interface",
        "Advanced Programming Interface",
        "Application Process Interface",
    ),
    _web_question(
        "Quel est le protocole sécurisé pour HTTP ?",
        "HTTPS", "FTPS", "SFTP", "SSH",
    ),
    _web_question(
        "Que signifie DOM ?",
        "Document Object Model",
        "Data Object Model",
        "Dynamic Object Model",
        "Document Oriented Model",
    ),
    _web_question(
        "Quel est le langage backend le plus utilisé avec JavaScript ?",
        "Node.js", "PHP", "Python", "Ruby",
    ),
    _web_question(
        "Que signifie JSON ?",
        "JavaScript Object Notation",
        "Java Standard Object Notation",
        "JavaScript Oriented Notation",
        "Java Script Object Network",
    ),
]

SAMPLE_COHORTS = [
    {
        "id": 1,
        "nom": "Promo Dev Web 2024",
        "filiere_id": 1,
        "referent_id": 1,
        "date_debut": date(2024, 1, 15),
        "date_fin": date(2024, 12, 15),
        "stage_obligatoire": True,
        "objectifs": "Former des développeurs web compétents",
    },
    {
        "id": 2,
        "nom": "Promo Data Science 2024",
        "filiere_id": 2,
        "referent_id": 2,
        "date_debut": date(2024, 2, 1),
        "date_fin": date(2024, 12, 1),
        "stage_obligatoire": True,
        "objectifs": "Former des data scientists expérimentés",
    },
    {
        "id": 3,
        "nom": "Promo Cybersécurité 2024",
        "filiere_id": 3,
        "referent_id": 3,
        "date_debut": date(2024, 3, 1),
        "date_fin": date(2024, 12, 20),
        "stage_obligatoire": True,
        "objectifs": "Former des experts en sécurité informatique",
    },
]

SAMPLE_LEARNERS = [
    {"nom": "Dupont", "prenom": "Alice", "email": "alice.dupont@email.com", "telephone": "0123456789", "promo_id": 1},
    {"nom": "Bernard", "prenom": "Bob", "email": "bob.bernard@email.com", "telephone": "0123456790", "promo_id": 1},
    {"nom": "Charre", "prenom": "Charlie", "email": "charlie.charre@email.com", "telephone": "0123456791", "promo_id": 2},
    {"nom": "Durand", "prenom": "David", "email": "david.durand@email.com", "telephone": "0123456792", "promo_id": 2},
    {"nom": "Moreau", "prenom": "Eve", "email": "eve.moreau@email.com", "telephone": "0123456793", "promo_id": 3},
]
