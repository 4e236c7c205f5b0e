from cuiconnect.app_shell.context import ServiceContext
from cuiconnect.components.accounts import (
    LoginInput,
    RegisterSocietyAdminInput,
    RegisterStudentInput,
    ToggleStatusInput,
    run_login,
    run_register,
    run_toggle_status,
)


def _register_student(ctx, id, email, name="Ali | Khan \\ Jr", skills="Java, Web | Dev"):
    return run_register(
        RegisterStudentInput(
            id=id,
            name=name,
            email=email,
            password="pass123",
            department="Computer Science",
            semester=5,
            skills=skills,
        ),
        ctx.directory,
        ctx.store,
        ctx.rules.registration,
    )


def _fresh(ctx: ServiceContext) -> ServiceContext:
    """A second process pointed at the same table."""
    return ServiceContext.create(ctx.rules, ctx.base_dir, clock=ctx.clock)


def test_registration_survives_restart(ctx):
    first = _register_student(ctx, "FA20-BCS-001", "a@x.com")
    assert first.success and first.persisted

    duplicate = run_register(
        RegisterSocietyAdminInput(id="SA001", name="Other", email="A@X.com", password="pw"),
        ctx.directory,
        ctx.store,
    )
    assert duplicate.error == "Email already registered"

    restarted = _fresh(ctx)
    loaded = restarted.load_users()
    assert loaded.loaded == 1

    auth = run_login(LoginInput(email="a@x.com", password="pass123"), restarted.directory)
    assert auth.success
    assert auth.user.user_id == first.user.user_id
    assert auth.user.name == "Ali | Khan \\ Jr"
    assert auth.user.profile.skills == ["java", "web | dev"]


def test_malformed_line_is_skipped_on_restart(ctx):
    _register_student(ctx, "S1", "s1@x.com")
    _register_student(ctx, "S2", "s2@x.com")

    table_path = ctx.base_dir / ctx.rules.storage.users_db_file
    lines = table_path.read_text(encoding="utf-8").splitlines()
    lines.insert(2, "STUDENT|BROKEN|only|five|fields")
    table_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    restarted = _fresh(ctx)
    result = restarted.load_users()

    assert result.loaded == 2
    assert len(result.skipped) == 1
    assert [u.email for u in restarted.directory.users] == ["s1@x.com", "s2@x.com"]


def test_toggle_status_is_durable(ctx, system_admin):
    student = _register_student(ctx, "S1", "s1@x.com").user

    result = run_toggle_status(
        ToggleStatusInput(actor=system_admin, target=student),
        ctx.directory,
        ctx.policy,
        ctx.store,
    )
    assert result.persisted

    restarted = _fresh(ctx)
    restarted.load_users()
    reloaded = restarted.directory.find_user_by_email("s1@x.com")
    assert reloaded.active is False

    auth = run_login(LoginInput(email="s1@x.com", password="pass123"), restarted.directory)
    assert auth.error == "Account is deactivated"


def test_empty_table_does_not_wipe_memory(ctx):
    _register_student(ctx, "S1", "s1@x.com")
    table_path = ctx.base_dir / ctx.rules.storage.users_db_file
    table_path.write_text("# CUICONNECT USERS DB\n", encoding="utf-8")

    result = ctx.load_users()

    assert result.replaced is False
    assert len(ctx.directory.users) == 1
