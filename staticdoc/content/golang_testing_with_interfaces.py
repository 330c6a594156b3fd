from __future__ import annotations

from staticdoc.domain.models import CodeSample, Document, Paragraph
from staticdoc.utils.constants import DEFAULT_STYLESHEET_HREF

SLUG = "golang-testing-with-interfaces"
TITLE = "Golang Testing with Interfaces"
PUBLISHED = "May 22nd, 2019"


def _go(source: str) -> CodeSample:
    # sources below open with a newline for readability
    return CodeSample(source.lstrip("\n"), language="go")


_CONCRETE_STORE = _go(r"""
type UserStore struct {
    db *sql.DB
}

func (s *UserStore) GetUser(id int) (*User, error) {
    row := s.db.QueryRow("SELECT id, name, email FROM users WHERE id = $1", id)
    u := &User{}
    if err := row.Scan(&u.ID, &u.Name, &u.Email); err != nil {
        return nil, err
    }
    return u, nil
}

type Greeter struct {
    store *UserStore
}

func (g *Greeter) Greet(id int) (string, error) {
    u, err := g.store.GetUser(id)
    if err != nil {
        return "", err
    }
    return fmt.Sprintf("Hello, %s!", u.Name), nil
}
""")

_INTERFACE = _go(r"""
type UserGetter interface {
    GetUser(id int) (*User, error)
}
""")

_INJECTED = _go(r"""
type Greeter struct {
    users UserGetter
}

func NewGreeter(users UserGetter) *Greeter {
    return &Greeter{users: users}
}
""")

_WIRING = _go(r"""
func main() {
    db, err := sql.Open("postgres", os.Getenv("DATABASE_URL"))
    if err != nil {
        log.Fatal(err)
    }
    greeter := NewGreeter(&UserStore{db: db})
    msg, err := greeter.Greet(42)
    if err != nil {
        log.Fatal(err)
    }
    fmt.Println(msg)
}
""")

_FAKE = _go(r"""
type fakeUserGetter struct {
    user *User
    err  error
}

func (f *fakeUserGetter) GetUser(id int) (*User, error) {
    return f.user, f.err
}
""")

_TABLE_TEST = _go(r"""
func TestGreet(t *testing.T) {
    tests := []struct {
        name    string
        getter  *fakeUserGetter
        want    string
        wantErr bool
    }{
        {"known user", &fakeUserGetter{user: &User{Name: "Gopher"}}, "Hello, Gopher!", false},
        {"lookup fails", &fakeUserGetter{err: errors.New("boom")}, "", true},
    }

    for _, tt := range tests {
        t.Run(tt.name, func(t *testing.T) {
            g := NewGreeter(tt.getter)
            got, err := g.Greet(1)
            if (err != nil) != tt.wantErr {
                t.Fatalf("Greet() error = %v, wantErr %v", err, tt.wantErr)
            }
            if got != tt.want {
                t.Errorf("Greet() = %q, want %q", got, tt.want)
            }
        })
    }
}
""")

_COMPILE_CHECK = _go(r"""
var _ UserGetter = (*UserStore)(nil)
var _ UserGetter = (*fakeUserGetter)(nil)
""")


def golang_testing_with_interfaces(stylesheet: str = DEFAULT_STYLESHEET_HREF) -> Document:
    """The article page. A new (equal) instance is built on every call."""
    return Document(
        title=TITLE,
        published=PUBLISHED,
        stylesheet=stylesheet,
        blocks=(
            Paragraph(
                "Code that talks to a database, a remote API or the file system is "
                "awkward to unit test. The usual answer in Go is not a mocking "
                "framework but a small interface and a bit of dependency injection."
            ),
            Paragraph(
                "Here is a typical starting point: a `Greeter` that looks a user up "
                "through a concrete `UserStore` backed by `database/sql`."
            ),
            _CONCRETE_STORE,
            Paragraph(
                "Testing `Greet` as written means standing up a real database. The "
                "`Greeter` only ever calls one method on the store, so describe that "
                "behaviour with an interface instead of naming the concrete type."
            ),
            _INTERFACE,
            Paragraph(
                "Now let `Greeter` depend on the interface and accept it through a "
                "constructor. The body of `Greet` does not change at all."
            ),
            _INJECTED,
            Paragraph(
                "Production code keeps passing the real store. Because Go interfaces "
                "are satisfied implicitly, `UserStore` needs no changes to qualify."
            ),
            _WIRING,
            Paragraph(
                "In tests we can hand the `Greeter` anything with a `GetUser` method. "
                "A tiny fake that returns canned values is enough."
            ),
            _FAKE,
            Paragraph(
                "With the fake in place, a table driven test covers both the happy "
                "path and the error path without touching a database."
            ),
            _TABLE_TEST,
            Paragraph(
                "Finally, a pair of blank assignments makes the compiler verify that "
                "both types keep satisfying the interface as the code evolves."
            ),
            _COMPILE_CHECK,
            Paragraph(
                "Keep interfaces small and define them where they are consumed. The "
                "fewer methods an interface has, the easier it is to fake, and the "
                "less your tests know about the implementation behind it."
            ),
        ),
    )
