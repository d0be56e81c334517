# app.py  (INTENTIONALLY INSECURE FOR LEARNING)
import traceback
from flask import Flask, render_template, request

import config
from models import init_db, seed_users
from repository import UserRepository

app = Flask(__name__)

user_repository = UserRepository()


# ===================================================================
# ROUTES
# ===================================================================

@app.route('/')
def home():
    """Landing page"""
    return render_template("index.html")


@app.route('/login', methods=['GET'])
def login_form():
    """Login form"""
    return render_template("login.html")


@app.route('/login', methods=['POST'])
def login():
    """Vulnerable login: SQL injection, reflected XSS and error disclosure"""
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        # VULNERABLE: raw input goes straight into the query text
        users = user_repository.find_by_username_and_password_vulnerable(username, password)

        if users:
            user = users[0]
            print(f"[+] Login accepted, {len(users)} row(s) matched")
            # VULNERABLE: XSS, username is rendered unescaped
            return render_template(
                "dashboard.html",
                user=user,
                welcome_message="Welcome back, " + username + "!",
            )

        print("[!] Login rejected")
        # VULNERABLE: XSS, username reflected in the error
        return render_template("login.html", error="Invalid credentials for user: " + username)
    except Exception as e:
        print(f"[!] Login query failed: {e}")
        traceback.print_exc()
        # VULNERABLE: information disclosure, raw database error
        return render_template("login.html", error="Database error: " + str(e))


@app.route('/search', methods=['GET'])
def search_form():
    """Search form"""
    return render_template("search.html")


@app.route('/search', methods=['POST'])
def search_users():
    """Vulnerable search across username and email"""
    search_term = request.form.get('searchTerm', '')
    context = {"search_term": search_term}

    try:
        # VULNERABLE: SQL injection in both LIKE clauses
        users = user_repository.search_users_vulnerable(search_term)
        print(f"[+] Search returned {len(users)} row(s)")
        context["users"] = users
        # VULNERABLE: XSS, search term rendered unescaped
        context["message"] = "Search results for: " + search_term
    except Exception as e:
        print(f"[!] Search query failed: {e}")
        traceback.print_exc()
        # VULNERABLE: information disclosure
        context["error"] = "Search error: " + str(e)

    return render_template("search.html", **context)


@app.route('/profile')
def profile():
    """Profile page that reflects the message query parameter"""
    # VULNERABLE: XSS, URL parameter rendered as-is
    message = request.args.get('message')
    return render_template("profile.html", message=message)


@app.route('/admin')
def admin():
    """Admin listing, no authentication at all"""
    debug = request.args.get('debug')
    debug_info = None
    if debug is not None:
        # VULNERABLE: XSS through the debug parameter
        debug_info = "Debug mode enabled with parameter: " + debug

    users = user_repository.find_all()
    return render_template("admin.html", users=users, debug_info=debug_info)


# ===================================================================
# CLI
# ===================================================================

@app.cli.command("init-db")
def init_db_command():
    """Create the users table and insert the demo accounts."""
    init_db()
    added = seed_users()
    print(f"[+] Database ready at {config.DB_URL} ({added} demo user(s) added)")


# ===================================================================
# MAIN
# ===================================================================

if __name__ == '__main__':
    print("\n" + "="*60)
    print("Vulnerable User Lab (SQL injection / XSS)")
    print("="*60)
    print("\n[!] INTENTIONALLY INSECURE. Bind to localhost only.")
    print(f"[INFO] Database: {config.DB_URL}")

    init_db()
    added = seed_users()
    if added:
        print(f"[+] Seeded {added} demo user(s)")

    print("[INFO] Endpoints:")
    print("  /login    SQL injection + reflected XSS")
    print("  /search   SQL injection + reflected XSS")
    print("  /profile  reflected XSS (?message=)")
    print("  /admin    reflected XSS (?debug=) + user disclosure")
    print(f"\n[INFO] Server starting at http://{config.HOST}:{config.PORT}")
    print("="*60 + "\n")

    app.run(debug=config.DEBUG, use_reloader=False, host=config.HOST, port=config.PORT)
