"""Login page UI components."""

from fasthtml.common import *

from ..models.user import UserRole

_DEMO_LABELS = {
    UserRole.CUSTOMER: "Login as Customer",
    UserRole.VENDOR: "Login as Vendor",
    UserRole.ADMIN: "Login as Admin",
}


def LoginPage(error_message: str = "", email: str = "", demo_enabled: bool = True):
    """
    Render the login page.

    Args:
        error_message: Optional error message to display
        email: Email to pre-fill after a failed attempt
        demo_enabled: Whether to show the demo account buttons
    """
    return (
        Title("WeddingBazaar - Login"),
        Main(
            Div(
                # Logo/Header
                Div(
                    H1("WeddingBazaar"),
                    P(
                        "Sign in to your account to continue planning your dream wedding",
                        cls="login-subtitle",
                    ),
                    cls="login-header",
                ),
                DemoLogins() if demo_enabled else None,
                # Login form
                Form(
                    Div(
                        Label("Email Address", fr="email"),
                        Input(
                            type="email",
                            name="email",
                            id="email",
                            value=email,
                            required=True,
                            autofocus=True,
                            placeholder="Enter your email",
                        ),
                        cls="form-group",
                    ),
                    Div(
                        Label("Password", fr="password"),
                        Input(
                            type="password",
                            name="password",
                            id="password",
                            required=True,
                            placeholder="Enter your password",
                        ),
                        cls="form-group",
                    ),
                    # Error message
                    Div(
                        error_message,
                        cls="error-message",
                    )
                    if error_message
                    else None,
                    Button("Sign In", type="submit", cls="btn-primary btn-login"),
                    action="/auth/login/submit",
                    method="post",
                    cls="login-form",
                ),
                cls="login-card",
            ),
            cls="login-container",
        ),
    )


def DemoLogins():
    """One-click demo account buttons, one per role."""
    return Div(
        P("Try Demo Accounts", cls="demo-title"),
        *[
            Form(
                Button(label, type="submit", cls=f"btn-demo btn-demo-{role.value}"),
                action=f"/auth/demo/{role.value}",
                method="post",
            )
            for role, label in _DEMO_LABELS.items()
        ],
        Hr(cls="login-divider"),
        cls="demo-logins",
    )


# CSS for login page (added to the app headers in app.py)
LOGIN_CSS = """
.login-container {
    min-height: 100vh;
    display: flex;
    align-items: center;
    justify-content: center;
    background: linear-gradient(135deg, #fdf2f8 0%, #fff1f2 100%);
    padding: 1rem;
}

.login-card {
    background: #fff;
    border-radius: 12px;
    padding: 2.5rem;
    box-shadow: 0 10px 40px rgba(0, 0, 0, 0.1);
    width: 100%;
    max-width: 420px;
}

.login-header {
    text-align: center;
    margin-bottom: 2rem;
}

.login-header h1 {
    margin: 0;
    color: #db2777;
    font-size: 2rem;
}

.login-subtitle {
    color: #6b7280;
    margin: 0.5rem 0 0;
    font-size: 0.9rem;
}

.demo-logins form {
    margin-bottom: 0.75rem;
}

.btn-demo, .btn-login {
    width: 100%;
    padding: 0.875rem;
    font-size: 1rem;
}

.login-form .form-group {
    margin-bottom: 1.25rem;
}

.login-form .error-message {
    color: #b91c1c;
    margin-bottom: 1rem;
}
"""
